from unittest.mock import Mock

import pytest

from common import definitions
from common.errors import InvalidClusterNameError, InvalidRegionError
from common.validation import get_available_regions, validate_cluster_name, validate_region
from eks_providers.errors import CommandError


def get_mocked_aws(regions=None):
    aws = Mock()
    if regions is None:
        aws.describe_regions.side_effect = CommandError(
            tool="aws",
            command=["aws", "ec2", "describe-regions"],
            exit_code=255,
            error_message="Unable to locate credentials",
        )
    else:
        aws.describe_regions.return_value = regions
    return aws


@pytest.mark.parametrize(
    "name", ["my-cluster-1", "a", "0", "-", "prod-eks", "a" * definitions.MAX_CLUSTER_NAME_LENGTH]
)
def test_valid_cluster_names(name):
    assert validate_cluster_name(name) == name


@pytest.mark.parametrize(
    "name",
    [
        "",
        None,
        "My_Cluster",
        "my cluster",
        "my_cluster",
        "cluster!",
        "Cluster",
        "my.cluster",
        "my-cluster\n",
        "a" * (definitions.MAX_CLUSTER_NAME_LENGTH + 1),
    ],
)
def test_invalid_cluster_names(name):
    with pytest.raises(InvalidClusterNameError) as exc:
        validate_cluster_name(name)
    assert "lowercase letters, numbers, hyphens" in str(exc.value)


def test_regions_fall_back_to_static_list_when_cli_fails():
    regions = get_available_regions(get_mocked_aws())
    assert regions == definitions.FALLBACK_REGIONS
    # The returned list is a copy.
    regions.append("xx-test-1")
    assert "xx-test-1" not in definitions.FALLBACK_REGIONS


def test_regions_fall_back_to_static_list_when_cli_returns_nothing():
    assert get_available_regions(get_mocked_aws(regions=[])) == definitions.FALLBACK_REGIONS


def test_regions_come_from_cli_when_available():
    aws = get_mocked_aws(regions=["us-east-1", "il-central-1"])
    assert get_available_regions(aws) == ["us-east-1", "il-central-1"]


@pytest.mark.parametrize("region", definitions.FALLBACK_REGIONS)
def test_every_fallback_region_is_accepted(region):
    assert validate_region(region, get_mocked_aws()) == region


@pytest.mark.parametrize("region", ["us-east-9", "", "US-EAST-1", "us-east-1 ", "mars-1"])
def test_unknown_regions_are_rejected(region):
    with pytest.raises(InvalidRegionError) as exc:
        validate_region(region, get_mocked_aws())
    assert exc.value.region == region
    assert exc.value.available_regions == definitions.FALLBACK_REGIONS


def test_region_is_checked_against_the_discovered_list():
    aws = get_mocked_aws(regions=["il-central-1"])
    assert validate_region("il-central-1", aws) == "il-central-1"

    with pytest.raises(InvalidRegionError) as exc:
        validate_region("us-east-1", aws)
    assert "Invalid AWS region: us-east-1" in str(exc.value)
    assert exc.value.available_regions == ["il-central-1"]
