# i18nstore/utils/yaml_io.py
# YAML parsing helpers with safe defaults.

from __future__ import annotations

from typing import Any

import yaml

_STR_TAG = "tag:yaml.org,2002:str"
_MERGE_TAG = "tag:yaml.org,2002:merge"


class StrKeySafeLoader(yaml.SafeLoader):
    """
    Safe loader that keeps scalar mapping keys as written.

    Plain `safe_load` resolves keys YAML 1.1 style (`no` -> False,
    `1` -> 1), which makes them unreachable by dotted string paths.
    Values are resolved as usual.
    """

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            # Merged (`<<`) keys must be in place before they are retagged
            self.flatten_mapping(node)
            for key_node, _value_node in node.value:
                if isinstance(key_node, yaml.ScalarNode) and key_node.tag != _MERGE_TAG:
                    key_node.tag = _STR_TAG
        return super().construct_mapping(node, deep=deep)


def from_yaml(text: str) -> Any:
    """
    Parse a YAML string using the safe loader.

    - No arbitrary Python object construction.
    - Scalar mapping keys are always strings.
    - An empty or comment-only document yields None.
    """
    return yaml.load(text, Loader=StrKeySafeLoader)  # noqa: S506
