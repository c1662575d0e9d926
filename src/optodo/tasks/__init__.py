"""
Task subsystem.

Components:
- task_models.py: Task dataclass and the seed fixture
- task_store.py: in-memory ordered store; every mutation emits one notice
- edit_session.py: the single in-progress rename (active id + draft)
- task_api.py: input-boundary helpers used by the presentation layer
"""
