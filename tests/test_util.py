import pytest

from capdo.util.net import is_cidr, is_port
from capdo.util.util import load_manifest, lookup
from capdo.util.hue import red, bad


def test_is_port():
    for port in [0, 22, 443, 6443, 65535]:
        assert is_port(port)

    for port in [-1, 65536, "443", None, 44.3]:
        assert not is_port(port)


def test_is_cidr():
    for cidr in ["10.0.0.0/16", "10.96.0.0/12", "192.168.0.0/24",
                 "fd00::/64"]:
        assert is_cidr(cidr)

    for cidr in ["", "10.0.0.0", "10.0.0.0/33", "abc/16", None, 10]:
        assert not is_cidr(cidr)


def test_lookup():
    data = {"spec": {"versions": {"kubelet": "1.13.1",
                                  "controlPlane": None}}}
    assert lookup(data, "spec.versions.kubelet") == "1.13.1"
    assert lookup(data, "spec.versions.controlPlane", "") == ""
    assert lookup(data, "spec.missing.kubelet") is None
    assert lookup(data, "spec.versions.kubelet.major", 1) == 1


def test_load_manifest(tmp_path):
    path = tmp_path / "machine.yml"
    path.write_text("metadata:\n  name: node-1\n")
    assert load_manifest(str(path)) == {"metadata": {"name": "node-1"}}

    path.write_text("just a string\n")
    with pytest.raises(ValueError):
        load_manifest(str(path))

    with pytest.raises(FileNotFoundError):
        load_manifest(str(tmp_path / "missing.yml"))


def test_hue():
    assert "failed" in bad(red("failed"))
    assert bad("x").startswith(red("[-]"))
