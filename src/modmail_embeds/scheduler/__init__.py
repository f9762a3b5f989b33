"""Background scheduling for the plugin.

- **periodic_scheduler.py**: ``PeriodicTaskScheduler`` runs a callback on a
  fixed interval, used to reset the avatar cache every hour.
"""
