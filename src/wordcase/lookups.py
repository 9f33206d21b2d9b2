import logging
import yaml
from functools import cached_property
from typing import Dict
from wordcase.connections import ConventionDataSource

logger = logging.getLogger(__name__)

class ConventionData(ConventionDataSource):
    def __init__(self):
        with self.yaml_path().open('r') as f:
            self.records: Dict[str, dict] = yaml.safe_load(f)
        logger.debug('Loaded %d naming conventions from %s', len(self.records), self.yaml_path())

    @cached_property
    def names(self):
        return list(self.records)

    @cached_property
    def name_to_separator(self):
        return {name: record['separator'] for name, record in self.records.items()}

    @cached_property
    def name_to_first(self):
        return {name: record['first'] for name, record in self.records.items()}

    @cached_property
    def name_to_rest(self):
        return {name: record['rest'] for name, record in self.records.items()}
