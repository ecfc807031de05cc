""" The schema registry: for every :class:`ApiKey`, the skeleton class that
    represents its request body and the range of wire versions this package
    knows about. The table is built once at import and never modified.
"""

from __future__ import annotations

import types
from typing import Dict, Mapping, Tuple, Type

from ..errors import SchemaUnknown
from . import message
from .apikeys import ApiKey


# Request types with a dedicated skeleton class. Anything not listed here
# is represented by message.GenericRequestData.

_classes = (
    message.ProduceRequestData,
    message.FetchRequestData,
    message.ListOffsetsRequestData,
    message.MetadataRequestData,
    message.UpdateMetadataRequestData,
    message.OffsetCommitRequestData,
    message.OffsetFetchRequestData,
    message.FindCoordinatorRequestData,
    message.JoinGroupRequestData,
    message.HeartbeatRequestData,
    message.LeaveGroupRequestData,
    message.SyncGroupRequestData,
    message.DescribeGroupsRequestData,
    message.ListGroupsRequestData,
    message.SaslHandshakeRequestData,
    message.ApiVersionsRequestData,
    message.CreateTopicsRequestData,
    message.DeleteTopicsRequestData,
    message.DeleteGroupsRequestData,
    message.ConsumerGroupDescribeRequestData,
)

classes: Dict[ApiKey, Type[message.RequestData]] = dict()
for _class in _classes:
    classes[_class.api_key] = _class

classes = types.MappingProxyType(classes)


# Lowest and highest request version for each api key.

_versions = {
    ApiKey.PRODUCE: (0, 10),
    ApiKey.FETCH: (0, 16),
    ApiKey.LIST_OFFSETS: (0, 8),
    ApiKey.METADATA: (0, 12),
    ApiKey.LEADER_AND_ISR: (0, 7),
    ApiKey.STOP_REPLICA: (0, 4),
    ApiKey.UPDATE_METADATA: (0, 8),
    ApiKey.CONTROLLED_SHUTDOWN: (0, 3),
    ApiKey.OFFSET_COMMIT: (0, 9),
    ApiKey.OFFSET_FETCH: (0, 9),
    ApiKey.FIND_COORDINATOR: (0, 4),
    ApiKey.JOIN_GROUP: (0, 9),
    ApiKey.HEARTBEAT: (0, 4),
    ApiKey.LEAVE_GROUP: (0, 5),
    ApiKey.SYNC_GROUP: (0, 5),
    ApiKey.DESCRIBE_GROUPS: (0, 5),
    ApiKey.LIST_GROUPS: (0, 4),
    ApiKey.SASL_HANDSHAKE: (0, 1),
    ApiKey.API_VERSIONS: (0, 3),
    ApiKey.CREATE_TOPICS: (0, 7),
    ApiKey.DELETE_TOPICS: (0, 6),
    ApiKey.DELETE_RECORDS: (0, 2),
    ApiKey.INIT_PRODUCER_ID: (0, 4),
    ApiKey.OFFSET_FOR_LEADER_EPOCH: (0, 4),
    ApiKey.ADD_PARTITIONS_TO_TXN: (0, 4),
    ApiKey.ADD_OFFSETS_TO_TXN: (0, 3),
    ApiKey.END_TXN: (0, 3),
    ApiKey.WRITE_TXN_MARKERS: (0, 1),
    ApiKey.TXN_OFFSET_COMMIT: (0, 3),
    ApiKey.DESCRIBE_ACLS: (0, 3),
    ApiKey.CREATE_ACLS: (0, 3),
    ApiKey.DELETE_ACLS: (0, 3),
    ApiKey.DESCRIBE_CONFIGS: (0, 4),
    ApiKey.ALTER_CONFIGS: (0, 2),
    ApiKey.ALTER_REPLICA_LOG_DIRS: (0, 2),
    ApiKey.DESCRIBE_LOG_DIRS: (0, 4),
    ApiKey.SASL_AUTHENTICATE: (0, 2),
    ApiKey.CREATE_PARTITIONS: (0, 3),
    ApiKey.CREATE_DELEGATION_TOKEN: (0, 3),
    ApiKey.RENEW_DELEGATION_TOKEN: (0, 2),
    ApiKey.EXPIRE_DELEGATION_TOKEN: (0, 2),
    ApiKey.DESCRIBE_DELEGATION_TOKEN: (0, 3),
    ApiKey.DELETE_GROUPS: (0, 2),
    ApiKey.ELECT_LEADERS: (0, 2),
    ApiKey.INCREMENTAL_ALTER_CONFIGS: (0, 1),
    ApiKey.ALTER_PARTITION_REASSIGNMENTS: (0, 0),
    ApiKey.LIST_PARTITION_REASSIGNMENTS: (0, 0),
    ApiKey.OFFSET_DELETE: (0, 0),
    ApiKey.DESCRIBE_CLIENT_QUOTAS: (0, 1),
    ApiKey.ALTER_CLIENT_QUOTAS: (0, 1),
    ApiKey.DESCRIBE_USER_SCRAM_CREDENTIALS: (0, 0),
    ApiKey.ALTER_USER_SCRAM_CREDENTIALS: (0, 0),
    ApiKey.VOTE: (0, 0),
    ApiKey.BEGIN_QUORUM_EPOCH: (0, 0),
    ApiKey.END_QUORUM_EPOCH: (0, 0),
    ApiKey.DESCRIBE_QUORUM: (0, 1),
    ApiKey.ALTER_PARTITION: (0, 3),
    ApiKey.UPDATE_FEATURES: (0, 1),
    ApiKey.ENVELOPE: (0, 0),
    ApiKey.FETCH_SNAPSHOT: (0, 0),
    ApiKey.DESCRIBE_CLUSTER: (0, 1),
    ApiKey.DESCRIBE_PRODUCERS: (0, 0),
    ApiKey.BROKER_REGISTRATION: (0, 3),
    ApiKey.BROKER_HEARTBEAT: (0, 1),
    ApiKey.UNREGISTER_BROKER: (0, 0),
    ApiKey.DESCRIBE_TRANSACTIONS: (0, 0),
    ApiKey.LIST_TRANSACTIONS: (0, 0),
    ApiKey.ALLOCATE_PRODUCER_IDS: (0, 0),
    ApiKey.CONSUMER_GROUP_HEARTBEAT: (0, 0),
    ApiKey.CONSUMER_GROUP_DESCRIBE: (0, 0),
    ApiKey.CONTROLLER_REGISTRATION: (0, 0),
    ApiKey.GET_TELEMETRY_SUBSCRIPTIONS: (0, 0),
    ApiKey.PUSH_TELEMETRY: (0, 0),
    ApiKey.ASSIGN_REPLICAS_TO_DIRS: (0, 0),
    ApiKey.LIST_CLIENT_METRICS_RESOURCES: (0, 0),
    ApiKey.DESCRIBE_TOPIC_PARTITIONS: (0, 0),
}

versions: Mapping[ApiKey, Tuple[int, int]] = types.MappingProxyType(_versions)


def lookup(api_key) -> ApiKey:
    """ Normalize *api_key*, which may be an :class:`ApiKey` or its integer
        wire id, raising :class:`SchemaUnknown` if the registry does not
        know it.
    """

    try:
        key = ApiKey(api_key)
    except ValueError:
        raise SchemaUnknown(api_key) from None

    if key not in versions:
        raise SchemaUnknown(key)

    return key


def message_class(api_key) -> Type[message.RequestData]:
    """ Return the skeleton class for *api_key*. Request types without a
        dedicated class map to :class:`message.GenericRequestData`.
    """

    key = lookup(api_key)
    return classes.get(key, message.GenericRequestData)


def default_skeleton(api_key) -> message.RequestData:
    """ Return a new, default-valued skeleton for *api_key*.
    """

    key = lookup(api_key)

    try:
        skeleton_class = classes[key]
    except KeyError:
        return message.GenericRequestData(api_key=key)

    return skeleton_class()


def supported_versions(api_key) -> range:
    """ Return the versions of *api_key* known to this registry, as a range.
    """

    key = lookup(api_key)
    lowest, highest = versions[key]
    return range(lowest, highest + 1)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
