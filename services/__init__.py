"""Account service layer."""
