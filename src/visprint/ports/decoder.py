# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from abc import ABC, abstractmethod
from pathlib import Path

from ..domain.models import PixelBuffer


class DecoderPort(ABC):
    """Abstract interface for turning an image file into an RGBA pixel buffer."""

    @abstractmethod
    def supports(self, path: Path) -> bool:
        """Return True if this decoder should be tried on the given path."""
        raise NotImplementedError

    @abstractmethod
    def decode(self, path: Path) -> PixelBuffer:
        """Decode the file at path; raise DecodeError on failure."""
        raise NotImplementedError

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name of the decoder."""
        raise NotImplementedError
