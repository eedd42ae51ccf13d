import os
import re

import pytest

from kubecf.settings import DEFAULT_FILENAME_PATTERN, Settings


def test_defaults(tmp_path):
    home = str(tmp_path)
    s = Settings.from_environ({}, home=home)
    kube = os.path.join(home, ".kube")
    assert s.home_dir == home
    assert s.kube_dir == kube
    assert s.config_dir == os.path.join(kube, "kubectl-cf")
    assert s.previous_path == os.path.join(kube, "kubectl-cf", "previous")
    assert s.kubeconfig_dir_paths == ("@kubeconfig-dir",)
    assert s.kubeconfig_path == os.path.join(kube, "config")
    assert s.kubeconfig_dir == kube
    assert s.filename_pattern.pattern == DEFAULT_FILENAME_PATTERN


def test_paths_filter_empty_items(tmp_path):
    s = Settings.from_environ({"KUBECTL_CF_PATHS": "a::b:"}, home=str(tmp_path))
    assert s.kubeconfig_dir_paths == ("a", "b")


def test_only_separators_falls_back(tmp_path):
    s = Settings.from_environ({"KUBECTL_CF_PATHS": "::"}, home=str(tmp_path))
    assert s.kubeconfig_dir_paths == ("@kubeconfig-dir",)


def test_kubeconfig_env(tmp_path):
    path = str(tmp_path / "configs" / "main")
    s = Settings.from_environ({"KUBECONFIG": path}, home=str(tmp_path))
    assert s.kubeconfig_path == path
    assert s.kubeconfig_dir == str(tmp_path / "configs")


def test_relative_kubeconfig_dir(tmp_path):
    s = Settings.from_environ({"KUBECONFIG": "config"}, home=str(tmp_path))
    assert s.kubeconfig_dir == "."


def test_config_dir_env(tmp_path):
    custom = str(tmp_path / "cfg")
    s = Settings.from_environ({"KUBECTL_CF_CONFIG_DIR": custom}, home=str(tmp_path))
    assert s.config_dir == custom
    assert s.previous_path == os.path.join(custom, "previous")


def test_pattern_env(tmp_path):
    env = {"KUBECTL_CF_KUBECONFIG_MATCH_PATTERN": r"^(?P<name>\w+)\.conf$"}
    s = Settings.from_environ(env, home=str(tmp_path))
    assert s.filename_pattern.search("dev.conf").group("name") == "dev"


def test_invalid_pattern(tmp_path):
    with pytest.raises(re.error):
        Settings.from_environ({"KUBECTL_CF_KUBECONFIG_MATCH_PATTERN": "(("}, home=str(tmp_path))


def test_default_pattern_matches(tmp_path):
    pattern = Settings.from_environ({}, home=str(tmp_path)).filename_pattern
    assert pattern.search("config").group("name") == "config"
    assert pattern.search("dev.yaml").group("name") == "dev.yaml"
    assert pattern.search("a.b.yaml") is None
    assert pattern.search("notes.txt") is None


def test_ensure_dirs_creates(tmp_path):
    s = Settings.from_environ({}, home=str(tmp_path))
    assert os.listdir(tmp_path) == []
    s.ensure_dirs()
    assert sorted(os.listdir(tmp_path)) == [".kube"]
    assert sorted(os.listdir(s.kube_dir)) == ["kubectl-cf"]
    assert os.listdir(s.config_dir) == []
    s.ensure_dirs()
    assert sorted(os.listdir(s.kube_dir)) == ["kubectl-cf"]
    assert os.listdir(s.config_dir) == []


def test_ensure_dirs_missing_parent(tmp_path):
    custom = str(tmp_path / "no" / "such" / "cfg")
    s = Settings.from_environ({"KUBECTL_CF_CONFIG_DIR": custom}, home=str(tmp_path))
    with pytest.raises(FileNotFoundError):
        s.ensure_dirs()