"""
Dependency Inversion - violation

NotificationService builds its own EmailSender and SMSSender and calls their
differently named methods. Adding push notifications means editing the
service, and there is no way to hand it a fake sender in a test.
"""


class EmailSender:
    def send_email(self, message, email_address):
        print(f"Sending email to {email_address}: {message}")


class SMSSender:
    def send_sms(self, message, phone_number):
        print(f"Sending SMS to {phone_number}: {message}")


class NotificationService:
    def __init__(self):
        # concrete classes created right here
        self.email_sender = EmailSender()
        self.sms_sender = SMSSender()

    def notify_by_email(self, message, email_address):
        self.email_sender.send_email(message, email_address)

    def notify_by_sms(self, message, phone_number):
        self.sms_sender.send_sms(message, phone_number)


def main():
    service = NotificationService()
    service.notify_by_email("Your order has been processed", "user@example.com")
    service.notify_by_sms("Your package has been shipped", "+1234567890")

    print("\nTrying to send a push notification:")
    try:
        service.notify_by_push("New message received", "device_token_123")
    except AttributeError as e:
        print(f"Error: {e}")
        print("(NotificationService has to be edited for every new channel)")

    print("\nTrying to test without really sending:")
    service.email_sender = None  # the only seam is reaching into its attributes
    try:
        service.notify_by_email("ping", "tester@example.com")
    except AttributeError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
