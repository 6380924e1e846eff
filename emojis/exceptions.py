# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot


class EmojiError(Exception):
    def __init__(self, message, **kwargs):
        super().__init__(message)
        self.kwargs = kwargs


class CatalogIntegrityError(EmojiError):
    """The embedded dataset is malformed and no catalog can be built from it"""

    def __init__(self, message, record=None, **kwargs):
        super().__init__(message, **kwargs)
        self.record = record

    def display(self):
        if self.record is None:
            return str(self)
        return f"{self} : {self.record!r}"


class UnknownGroupError(EmojiError, ValueError):
    def __init__(self, name):
        super().__init__(f"Unknown emoji group `{name}`", name=name)
        self.name = name
