import importlib
import random
from .interface import NotificationSink


def get_class_from_string(s):
    module_name, class_name = s.rsplit(".", 1)
    return getattr(importlib.import_module(module_name), class_name)


def get_notification_sink(settings):
    Sink = get_class_from_string(settings.notifier_class)
    if not (isinstance(Sink, type) and issubclass(Sink, NotificationSink)):
        raise ValueError(f"{settings.notifier_class} is not a NotificationSink")
    sink = Sink.model_validate(settings.model_dump())
    return sink


def get_grade_source(settings):
    rng = random.Random(settings.seed)

    def grade_source():
        return rng.randint(0, 100)

    return grade_source
