from .notification_sink import NotificationSink
