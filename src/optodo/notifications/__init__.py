"""
Notice subsystem.

Components:
- notice_models.py: Notice, NoticeKind and the fixed per-mutation wording
- notice_center.py: single-slot controller with cancel-on-supersede auto-clear
- timers.py: asyncio-backed TimerScheduler
"""
