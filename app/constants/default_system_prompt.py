class DefaultSystemPrompt:
    """Persona used when no style pack applies, and the model's framing reply."""

    CONTENT = "You are a helpful AI assistant."

    ACKNOWLEDGEMENT = (
        "I understand. I will respond according to this personality and style."
    )
