"""The key handed out by a store."""

import string

KEY_LENGTH = 56

_HEXDIGITS = frozenset(string.digits + "abcdef")


class FileKey(str):
    """Lowercase hex SHA-224 digest identifying a stored blob.

    It is a plain string in every other respect, so it compares, sorts,
    hashes and serializes by its text.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, text):
        """Validate `text` and return it as a :class:`FileKey`.

        Raises:
            ValueError: If `text` is not a 56 character hex string.
        """
        if isinstance(text, cls):
            return text

        if not isinstance(text, str):
            raise ValueError("FileKey must be a string, not {0!r}"
                             .format(type(text).__name__))

        key = text.strip().lower()
        if len(key) != KEY_LENGTH or not _HEXDIGITS.issuperset(key):
            raise ValueError("Invalid FileKey: {0!r}".format(text))

        return cls(key)

    def __repr__(self):
        return "FileKey({0})".format(str.__repr__(self))
