"""Background scheduling for the daily Word of the Day broadcast.

This package provides:
- scheduler.py: DailyScheduler on APScheduler's AsyncIOScheduler
"""

from __future__ import annotations
