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

import logging
from importlib import resources
from pathlib import Path
from typing import BinaryIO

from ...domain.errors import SourceNotFoundError
from ...ports.source import SourcePort

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "linegroup.resources"


class LocalSource(SourcePort):
    """
    Resolves an identifier against the local filesystem first, then against
    the data files bundled in ``linegroup.resources``.
    """

    def __init__(self, resource_package: str = RESOURCE_PACKAGE) -> None:
        self._resource_package = resource_package

    def open_bytes(self, identifier: str) -> BinaryIO:
        path = Path(identifier)
        if path.is_file():
            logger.debug("LocalSource: reading %s from filesystem", path)
            return open(path, "rb")

        resource = resources.files(self._resource_package).joinpath(identifier)
        if resource.is_file():
            logger.debug("LocalSource: reading bundled resource %s", identifier)
            return resource.open("rb")

        raise SourceNotFoundError(identifier)
