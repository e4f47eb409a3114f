"""
Task subsystem.

Components:
- errors.py: scheduler error hierarchy
- task_models.py: data structures (Task, TaskPriority)
- task_factory.py: text input validation + Task construction
- conflict_notifier.py: observer that reports overlapping tasks
- schedule_manager.py: the schedule itself (add/remove/complete/view)
"""
