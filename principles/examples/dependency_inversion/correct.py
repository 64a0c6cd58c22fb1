"""
Dependency Inversion - correct implementation

NotificationService only knows the MessageSender abstraction. Email, SMS,
push and Slack senders implement it and are handed in by the caller, so a
new channel (or a test double) needs no change to the service.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple


class MessageSender(ABC):
    @abstractmethod
    def send(self, message: str, recipient: str) -> None: ...


class EmailSender(MessageSender):
    def send(self, message, recipient):
        print(f"Sending email to {recipient}: {message}")


class SMSSender(MessageSender):
    def send(self, message, recipient):
        print(f"Sending SMS to {recipient}: {message}")


class PushNotificationSender(MessageSender):
    def send(self, message, recipient):
        print(f"Sending push notification to {recipient}: {message}")


class NotificationService:
    def __init__(self, sender: MessageSender):
        self.sender = sender

    def notify(self, message: str, recipient: str) -> None:
        self.sender.send(message, recipient)


class SlackSender(MessageSender):
    """Added later; NotificationService did not change."""

    def send(self, message, recipient):
        print(f"Sending Slack message to {recipient}: {message}")


class RecordingSender(MessageSender):
    def __init__(self):
        self.sent: List[Tuple[str, str]] = []

    def send(self, message, recipient):
        self.sent.append((message, recipient))


def main():
    NotificationService(EmailSender()).notify("Your order has been processed", "user@example.com")
    NotificationService(SMSSender()).notify("Your package has been shipped", "+1234567890")
    NotificationService(PushNotificationSender()).notify("New message received", "device_token_123")

    print("\nA new channel plugs in without touching NotificationService:")
    NotificationService(SlackSender()).notify("Team meeting at 3 PM", "general-channel")

    print("\nAnd a test double is just another implementation:")
    recorder = RecordingSender()
    NotificationService(recorder).notify("ping", "tester")
    print("Recorded:", recorder.sent)


if __name__ == "__main__":
    main()
