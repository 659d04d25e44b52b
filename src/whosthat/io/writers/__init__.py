"""Writers for plain text and exported games."""
