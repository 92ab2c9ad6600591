import logging


# --------------------------------------------------------------------------------------------------
def get_logger():
    return logging.getLogger("classroll")


# --------------------------------------------------------------------------------------------------
def status_value(status) -> str:
    # sinks accept both AssignmentStatus members and bare strings
    return getattr(status, "value", status)
