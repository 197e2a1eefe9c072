"""Domain layer: the email address value type and its rules."""
