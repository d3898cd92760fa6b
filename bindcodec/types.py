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

"""
Schema type markers, they can be used in a `VariantDescriptor` (or directly in annotations) to select a codec that is
more specific than the one for the plain Python type, for example one that checks the range of an integer.
"""

from typing import NewType

Int8 = NewType('Int8', int)
Int16 = NewType('Int16', int)
Int32 = NewType('Int32', int)
Int64 = NewType('Int64', int)
Uint8 = NewType('Uint8', int)
Uint16 = NewType('Uint16', int)
Uint32 = NewType('Uint32', int)
Uint64 = NewType('Uint64', int)

__all__ = [
    'Int8',
    'Int16',
    'Int32',
    'Int64',
    'Uint8',
    'Uint16',
    'Uint32',
    'Uint64',
]
