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


class VisprintError(Exception):
    """Base exception for domain-specific errors."""


class InvalidImageError(VisprintError, ValueError):
    """Zero-dimension, empty or truncated pixel buffer."""


class ImageTooSmallError(VisprintError, ValueError):
    """Image dimensions smaller than the requested grid size."""


class IncompatibleFingerprintError(VisprintError, ValueError):
    """Comparison between fingerprints of different grid sizes."""


class MalformedFingerprintError(VisprintError, ValueError):
    """Hex string of the wrong length or with non-hex characters."""


class ConfigurationError(VisprintError):
    """Bad CLI args or unusable settings (e.g., grid size < 2)."""


class DecodeError(VisprintError):
    """The image decoder could not turn a file into a pixel buffer."""
