#  Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import keyword
import re

_NON_IDENTIFIER_RE = re.compile(r'[^0-9a-zA-Z]+')
_LOWER_UPPER_RE = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')
_ACRONYM_WORD_RE = re.compile(r'(?<=[A-Z]{2})(?=[A-Z][a-z])')


def normalize_identifier(name: str) -> str:
    """ Map a schema identifier to the Python identifier used to name a variant accessor.

    Schema identifiers can use dashes, dots and CamelCase, accessors are snake_case attributes:

    >>> normalize_identifier('ip-address')
    'ip_address'
    >>> normalize_identifier('IPv4Address')
    'ipv4_address'
    >>> normalize_identifier('XMLHttpRequest')
    'xml_http_request'
    >>> normalize_identifier('int32')
    'int32'
    >>> normalize_identifier('already_snake')
    'already_snake'
    >>> normalize_identifier('2nd-choice')
    '_2nd_choice'
    >>> normalize_identifier('class')
    'class_'
    """
    if not name:
        raise ValueError('identifier cannot be empty')
    words = _NON_IDENTIFIER_RE.sub('_', name).strip('_')
    words = _LOWER_UPPER_RE.sub('_', words)
    words = _ACRONYM_WORD_RE.sub('_', words)
    identifier = words.lower()
    if not identifier:
        raise ValueError(f'{name!r} has no usable characters')
    if identifier[0].isdigit():
        identifier = f'_{identifier}'
    if keyword.iskeyword(identifier):
        identifier = f'{identifier}_'
    return identifier
