"""Infrastructure adapters: persistence, e-mail, security, localisation."""
