"""UserHub - user accounts with e-mail activation and bearer tokens."""
