from functools import lru_cache

from fastapi import Depends

from app.core.config import settings
from app.application.ports.scheduler import SchedulerPort
from app.application.use_cases.doctor_widget import DoctorDetailWidget, WidgetOptions
from app.domain.entities.doctor_profile import DoctorProfile
from app.infrastructure.navigation.recording_navigator import RecordingNavigator
from app.infrastructure.notifications.memory_notifier import InMemoryNotifier
from app.infrastructure.scheduling.threading_scheduler import ThreadingScheduler
from app.infrastructure.store.widget_store import MemoryWidgetStore, WidgetSession


@lru_cache
def get_scheduler() -> SchedulerPort:
    return ThreadingScheduler()


@lru_cache
def get_widget_store() -> MemoryWidgetStore:
    return MemoryWidgetStore()


def get_widget_options() -> WidgetOptions:
    return WidgetOptions(
        navigation_delay_ms=settings.NAVIGATION_DELAY_MS,
        notification_duration_ms=settings.NOTIFICATION_DURATION_MS,
        home_path=settings.HOME_PATH,
        currency_symbol=settings.CURRENCY_SYMBOL,
    )


class WidgetFactory:
    def __init__(self, scheduler: SchedulerPort, options: WidgetOptions) -> None:
        self._scheduler = scheduler
        self._options = options

    def mount(self, profile: DoctorProfile) -> WidgetSession:
        notifier = InMemoryNotifier(scheduler=self._scheduler)
        navigator = RecordingNavigator()
        widget = DoctorDetailWidget.mount(
            profile=profile,
            notifier=notifier,
            navigator=navigator,
            scheduler=self._scheduler,
            options=self._options,
        )
        return WidgetSession(widget=widget, notifier=notifier, navigator=navigator)


def get_widget_factory(
    scheduler: SchedulerPort = Depends(get_scheduler),
    options: WidgetOptions = Depends(get_widget_options),
) -> WidgetFactory:
    return WidgetFactory(scheduler=scheduler, options=options)
