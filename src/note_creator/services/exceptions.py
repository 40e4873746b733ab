class NoteCreatorError(Exception):
    """Base exception for note creation failures"""

    pass


class FileOperationError(NoteCreatorError):
    """Raised when file operations fail"""

    pass


class NoteNotFoundError(NoteCreatorError):
    """Raised when a note or template cannot be found"""

    pass


class NoteExistsError(NoteCreatorError):
    """Raised when a note already exists at the target path"""

    pass


class NoteTypeNotFoundError(NoteCreatorError):
    """Raised when no note type is configured under the requested id"""

    pass


class InvalidNoteError(NoteCreatorError):
    """Raised when the request to create or update a note is incomplete or invalid"""

    pass
