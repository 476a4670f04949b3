from typing import List

from conda_share._src.conda import Conda


class EnvironmentCatalog():
    def __init__(self, conda: Conda):
        self.conda = conda

    def list_environments(self) -> List[str]:
        """Return every named environment conda knows about, in the order
        conda reports them.
        """
        return self.conda.env_list()

    def exists(self, env_name: str) -> bool:
        return env_name in self.list_environments()
