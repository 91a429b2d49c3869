# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import logging
import re


class RedactingFilter(logging.Filter):
    """Filter class to redact sensitive information in logs.

    This filter looks for certain sensitive keys and if a match is found, the
    value will be redacted. The value are expected to be strings. If they are
    dictionaries or iterables, resulting redaction will be partial. Normally
    the value for a sensitive key will be a plain string.
    """

    _SENSITIVE_KEYS = ['authorization',
                       'password',
                       'apikey',
                       'bearer_token',
                       'refresh_token',
                       'access_token',
                       'client_secret']

    _REDACTED_MSG = r"[REDACTED]"

    def __init__(self):
        """."""
        super().__init__()

        pattern_key = "|".join(self._SENSITIVE_KEYS)

        # The following pattern will match key-value pairs as follows
        # key: value
        # key: 'value'
        # 'key': value
        # 'key': 'value'
        # key=value
        # where key is one of the keys defined in the list of sensitive keys
        # and value will be accessible as group 4
        self._pattern = \
            r"((" + pattern_key + r")(\"|')?(?::\s+|=)[{\[]*'?)([^'&,}\s]+)"

    def filter(self, record):
        """Overridden filter method to redact log records.

        record.msg is always a string, record.args is the arg list from which
        the formatter will pick values if necessary and hence should be
        redacted too.

        :param logRecord record: logRecord object that needs redaction

        :returns: True, which forces the filter chain processing to continue.

        :rtype: boolean
        """
        record.msg = self.redact(record.msg)
        if record.args:
            record.args = self.redact(record.args)
        return True

    def redact(self, obj):
        """Redact sensitive data in an object.

        The redaction algorithm will preserve dictionary structure. Iterables
        like list etc. will be converted to n-tuple. Everything else will be
        converted to string.

        :param object obj: the object which contains sensitive data to be
            redacted.

        :return: the redacted version of the object.

        :rtype: object
        """
        if obj is None:
            return obj

        if isinstance(obj, dict):
            result = {}
            for k in obj.keys():
                if str(k).lower() in self._SENSITIVE_KEYS:
                    result[k] = self._REDACTED_MSG
                else:
                    result[k] = self.redact(obj[k])
            return result
        elif isinstance(obj, (list, tuple, set)):
            return tuple(self.redact(item) for item in obj)
        else:
            msg_str = str(obj)
            # bearer tokens appear without a key in header dumps
            msg_str = re.sub(pattern=r"(Bearer|Basic)\s+[^'\",}\s]+",
                             string=msg_str,
                             repl=r"\1 " + self._REDACTED_MSG,
                             flags=re.IGNORECASE)
            redacted_msg = re.sub(pattern=self._pattern,
                                  string=msg_str,
                                  repl=r"\1" + self._REDACTED_MSG,
                                  flags=re.IGNORECASE)
            return redacted_msg
