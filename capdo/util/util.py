"""
General purpose utilities
"""
import yaml


def load_manifest(path):
    """
    read a YAML manifest (e.g. a Cluster or a Machine) from ``path``

    Args:
        path (str): the file to read

    Returns:
        the manifest as ``dict``

    Raises:
        ValueError if the file does not contain a YAML mapping
    """
    with open(path, 'r') as stream:
        manifest = yaml.safe_load(stream)

    if not isinstance(manifest, dict):
        raise ValueError("manifest %s is not a YAML mapping" % path)

    return manifest


def lookup(mapping, path, default=None):
    """
    get a nested value from a dict, following a dotted path.

    Example:
        >>> lookup({'spec': {'versions': {'kubelet': '1.13.1'}}},
        ...        'spec.versions.kubelet')
        '1.13.1'

    Missing keys, and ``None`` values on the way, return ``default``.
    """
    value = mapping
    for key in path.split("."):
        if not isinstance(value, dict) or value.get(key) is None:
            return default
        value = value[key]
    return value
