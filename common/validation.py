import logging
import re
from typing import List, Optional

from eks_providers.errors import CommandError

from . import definitions
from .errors import InvalidClusterNameError, InvalidRegionError

logger = logging.getLogger(__name__)

_cluster_name_re = re.compile(definitions.CLUSTER_NAME_PATTERN)


def validate_cluster_name(name: Optional[str]) -> str:
    """
    Check name can be used as a cluster name.

    :raises InvalidClusterNameError: when empty, longer than the limit or
                                     holding anything but lowercase letters,
                                     digits and hyphens
    """
    if (
        not name
        or len(name) > definitions.MAX_CLUSTER_NAME_LENGTH
        or not _cluster_name_re.fullmatch(name)
    ):
        raise InvalidClusterNameError(
            name=name, max_length=definitions.MAX_CLUSTER_NAME_LENGTH
        )
    return name


def get_available_regions(aws) -> List[str]:
    """
    Ask the cloud for its regions, falling back to the built in list.

    :param aws: AwsCommand used for the lookup
    :return: List of region codes
    """
    try:
        regions = aws.describe_regions()
    except CommandError as command_error:
        logger.debug("Using fallback region list: {}".format(command_error))
        return list(definitions.FALLBACK_REGIONS)

    if not regions:
        logger.debug("Empty region list returned, using fallback region list")
        return list(definitions.FALLBACK_REGIONS)
    return regions


def validate_region(region: Optional[str], aws) -> str:
    """
    Check region is one of the regions currently known.

    :raises InvalidRegionError: carrying the region list consulted
    """
    available_regions = get_available_regions(aws)
    if region not in available_regions:
        raise InvalidRegionError(region=region, available_regions=available_regions)
    return region
