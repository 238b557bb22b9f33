from abc import ABC, abstractmethod


class INotificationService(ABC):
    """
    Transactional email, fire-and-forget.

    Implementations must return without waiting for delivery and must never
    raise delivery failures into the caller.
    """

    @abstractmethod
    def send_register_email(self, email: str) -> None:
        pass

    @abstractmethod
    def send_reset_password_email(self, email: str, code: str) -> None:
        pass
