from celery import Celery

from app.config import get_settings

settings = get_settings()

celery_app = Celery(
    settings.app_name,
    broker=settings.broker_url,
    include=["app.tasks.reward_task"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_ignore_result=True,
    # Tests run tasks inline; no broker is needed.
    task_always_eager=settings.is_test,
    task_eager_propagates=False,
)
