from .base.notification_sink import NotificationSink
