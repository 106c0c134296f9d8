"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, change events)
- task_factory.py: text parsing + TaskBuilder
- conflicts.py: half-open interval overlap checks
- notifier.py: synchronous observer fan-out
- task_store.py: in-memory storage (one lock shared with the facade)
- task_commands.py: reversible commands + undo log
- scheduler.py: SchedulerFacade, the entry point used by the CLI
"""
