# Import celery app first
from app.infra.celery_app import celery_app

# Initialize logging configuration for Celery workers
from app.infra.logging_config import LoggingConfig
from app.tasks.reward_task import accrue_rewards_task

LoggingConfig()  # Initialize logging

__all__ = [
    "celery_app",
    "accrue_rewards_task",
]
