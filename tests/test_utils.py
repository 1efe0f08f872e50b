import smtplib

from steamvision import utils


class FakeSMTP:
    instances = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        pass

    def login(self, user, password):
        self.credentials = (user, password)

    def sendmail(self, from_addr, to_addr, message):
        self.sent.append((from_addr, to_addr, message))


def _configure_smtp(monkeypatch):
    monkeypatch.setattr(utils.settings, "SMTP_SERVER", "smtp.example.com")
    monkeypatch.setattr(utils.settings, "SMTP_USER", "mailer")
    monkeypatch.setattr(utils.settings, "SMTP_PASSWORD", "secret")


def test_generate_verification_code():
    code = utils.generate_verification_code()
    assert len(code) == 6 and code.isdigit()
    assert len(utils.generate_verification_code(8)) == 8


def test_send_email_without_smtp_is_skipped(monkeypatch):
    monkeypatch.setattr(utils.settings, "SMTP_SERVER", "")
    monkeypatch.setattr(utils.smtplib, "SMTP", FakeSMTP)
    FakeSMTP.instances = []
    assert utils.send_verification_code_email("ada@example.com", "123456") is False
    assert FakeSMTP.instances == []


def test_send_verification_code_email(monkeypatch):
    _configure_smtp(monkeypatch)
    monkeypatch.setattr(utils.smtplib, "SMTP", FakeSMTP)
    FakeSMTP.instances = []

    assert utils.send_verification_code_email("ada@example.com", "123456") is True

    server = FakeSMTP.instances[0]
    assert server.credentials == ("mailer", "secret")
    from_addr, to_addr, message = server.sent[0]
    assert from_addr == "noreply@steamvision.app"
    assert to_addr == "ada@example.com"
    assert "Password reset verification code" in message
    assert "<strong>123456</strong>" in message


def test_send_failure_is_logged_not_raised(monkeypatch, caplog):
    _configure_smtp(monkeypatch)

    def broken(*args, **kwargs):
        raise smtplib.SMTPConnectError(421, "unavailable")

    monkeypatch.setattr(utils.smtplib, "SMTP", broken)
    assert utils.send_verification_code_email("ada@example.com", "123456") is False
    assert "Failed to send" in caplog.text
