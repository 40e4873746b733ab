"""Services for reading, creating and updating notes in a vault."""
