import logging
import subprocess

log = logging.getLogger(__name__)


def notify_send(summary: str, body: str = "", urgency: str = "normal", timeout: int = 5000) -> None:
    """
    Sends a desktop notification using notify-send.

    Args:
        summary (str): The title of the notification.
        body (str): Optional body text.
        urgency (str): "low", "normal", or "critical".
        timeout (int): Timeout in milliseconds.
    """
    try:
        subprocess.run(["notify-send", "--urgency", urgency, "--expire-time", str(timeout), summary, body])
    except OSError as exc:
        # No notification daemon client installed, the log line is all we get
        log.warning("notify-send unavailable: %s", exc)
