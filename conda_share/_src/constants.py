APP_NAME = "conda-share"

DEFAULT_CONDA_EXECUTABLE = "conda"

# conda list reports packages installed with pip under this channel
PYPI_CHANNEL = "pypi"

ENV_FILE_SUFFIX = ".yml"

CONFIG_SECTION = "conda"
CONFIG_KEY = "path"
