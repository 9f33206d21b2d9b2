from importlib import resources
from functools import cache

class ConventionDataSource:
    @classmethod
    @cache
    def yaml_path(cls):
        """ Convention rules shipped with the package """
        return resources.files('wordcase.data').joinpath('conventions.yaml')
