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

import os
from dataclasses import dataclass

DEFAULT_INPUT_FILE = "sample.txt"  # bundled in linegroup.resources
DEFAULT_OUTPUT_FILE = "output.txt"


@dataclass(frozen=True)
class AppConfig:
    """Startup parameters; CLI options override these."""

    input_file: str = DEFAULT_INPUT_FILE
    output_file: str = DEFAULT_OUTPUT_FILE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            input_file=os.getenv("LINEGROUP_INPUT_FILE") or DEFAULT_INPUT_FILE,
            output_file=os.getenv("LINEGROUP_OUTPUT_FILE") or DEFAULT_OUTPUT_FILE,
            log_level=os.getenv("LINEGROUP_LOG_LEVEL", "INFO").upper(),
        )
