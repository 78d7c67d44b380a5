# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Define exceptions raised while converting IoT Hub records to and from their wire form"""


class SchemaError(Exception):
    """Represents a failure converting an IoT Hub record to or from its wire form"""

    pass


class DecodeError(SchemaError):
    """Represents a wire document that is valid JSON but violates the typing of a field

    :ivar str field_name: The wire key of the offending field. Nested keys are dotted
        (e.g. 'authentication.symmetricKey.primaryKey'). None if the document itself
        is not a JSON object.
    """

    def __init__(self, field_name, message=None):
        if message is None:
            message = "Invalid value for field '{}'".format(field_name)
        super(DecodeError, self).__init__(message)
        self.field_name = field_name


class NotationError(SchemaError):
    """Represents a wire document that is not valid JSON

    :ivar int lineno: Line of the parse failure, if known
    :ivar int colno: Column of the parse failure, if known
    :ivar int pos: Character offset of the parse failure, if known
    """

    def __init__(self, message, lineno=None, colno=None, pos=None):
        super(NotationError, self).__init__(message)
        self.lineno = lineno
        self.colno = colno
        self.pos = pos
