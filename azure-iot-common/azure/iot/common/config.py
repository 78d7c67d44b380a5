# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import codecs
import logging
from azure.iot.common import constant

logger = logging.getLogger(__name__)


class SerializerConfig(object):
    """A class for storing the options used when rendering IoT Hub records as JSON.

    These options only affect the formatting of the output document. Key spellings and the
    rules for which fields are omitted are fixed by the IoT Hub schema and are never configurable.
    """

    def __init__(
        self,
        ensure_ascii=False,
        sort_keys=False,
        indent=None,
        encoding=constant.DEFAULT_ENCODING,
    ):
        """Initializer for SerializerConfig

        :param bool ensure_ascii: Escape all non-ASCII characters in the output. Default False.
        :param bool sort_keys: Emit object keys in sorted order. Default False.
        :param indent: Number of spaces used to pretty-print the output. None (the default)
            produces a compact document.
        :type indent: int or None
        :param str encoding: The codec used to turn the JSON text into bytes. Default 'utf-8'.

        :raises: ValueError if an option has an unsupported value.
        """
        self.ensure_ascii = bool(ensure_ascii)
        self.sort_keys = bool(sort_keys)
        self.indent = self._sanitize_indent(indent)
        self.encoding = self._sanitize_encoding(encoding)

    @staticmethod
    def _sanitize_indent(indent):
        if indent is None:
            return None
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            raise ValueError("Invalid indent. Must be a non-negative integer or None")
        return indent

    @staticmethod
    def _sanitize_encoding(encoding):
        try:
            name = codecs.lookup(encoding).name
        except (LookupError, TypeError):
            raise ValueError("Invalid encoding: {!r}".format(encoding))
        if name != constant.DEFAULT_ENCODING:
            logger.debug("Serializer configured with non-default encoding: {}".format(name))
        return name

    def json_dumps_kwargs(self):
        """Return the keyword arguments to pass to json.dumps"""
        kwargs = {
            "ensure_ascii": self.ensure_ascii,
            "sort_keys": self.sort_keys,
            "indent": self.indent,
        }
        if self.indent is None:
            kwargs["separators"] = (",", ":")
        return kwargs
