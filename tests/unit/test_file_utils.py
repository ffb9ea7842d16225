from unittest.mock import patch

import pytest

from common.errors import DependencyMissingError
from common.file_utils import check_dependencies, find_config_file


@patch("common.file_utils.shutil.which")
def test_all_dependencies_present(which_mock):
    which_mock.side_effect = lambda cmd: "/usr/local/bin/{}".format(cmd)
    check_dependencies()
    assert [c[0][0] for c in which_mock.call_args_list] == ["eksctl", "aws", "kubectl"]


@patch("common.file_utils.shutil.which")
def test_first_missing_dependency_is_reported(which_mock):
    which_mock.side_effect = lambda cmd: None if cmd != "eksctl" else "/usr/bin/eksctl"
    with pytest.raises(DependencyMissingError) as exc:
        check_dependencies()
    assert exc.value.dependency == "aws"
    # kubectl is never looked up once aws is missing.
    assert which_mock.call_count == 2


def test_find_config_file_order(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("EKS_MANAGER_CONFIG", raising=False)
    assert find_config_file() is None
    assert find_config_file("explicit.toml") == "explicit.toml"

    monkeypatch.setenv("EKS_MANAGER_CONFIG", "from-env.toml")
    assert find_config_file() == "from-env.toml"
    assert find_config_file("explicit.toml") == "explicit.toml"
