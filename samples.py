SAMPLE_MESSAGES = [
    "URGENT! Your account will be suspended in 24 hours. Click here to verify your bank details immediately!",
    "Congratulations! You've won $1,000,000 in our lottery. Send $500 processing fee to claim your prize.",
    "Hi, this is a normal message from your friend about meeting for coffee tomorrow.",
]

PREVIEW_LENGTH = 80


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Shortened text for the sample picker buttons."""
    return text[:length] + "..."
