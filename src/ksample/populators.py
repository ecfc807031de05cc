""" Per-request-type populators, and the registry that maps api keys to
    them.

    A populator takes a freshly constructed default skeleton and fills in
    the smallest nested structure that makes the request meaningful: one
    topic, one partition, one member, and so on. Two entries are used only
    where a single entry would not exercise list handling. Names and ids are
    drawn from the supplied :class:`ksample.names.NameSource`; a populator
    touches nothing but the skeleton it is handed.

    Every :class:`ApiKey` must be accounted for exactly once: either it has
    a populator in :data:`registry`, it is listed in :data:`NO_POPULATOR`,
    or it is excluded from default generation altogether. This is checked
    when the module is imported, so adding a request type forces a decision.
"""

import types

from . import exclusions
from .errors import PopulatorShapeMismatch
from .protocol import message
from .protocol import records
from .protocol.apikeys import ApiKey


ACKS_ALL = -1
ANY_REPLICA = -1

# Record timestamp for Produce samples, in milliseconds. Fixed, never the
# wall clock, so a seeded run repeats byte for byte.

RECORD_TIMESTAMP = 0


def _expect(skeleton, expected):
    """ Confirm the registry handed *skeleton* to the right populator.
    """

    if not isinstance(skeleton, expected):
        raise PopulatorShapeMismatch(expected, skeleton)

    return skeleton


def noop(skeleton, names):
    """ Leave the default skeleton as it is. """


def populate_produce(skeleton, names):
    request = _expect(skeleton, message.ProduceRequestData)

    partition = message.PartitionProduceData()
    entry = records.record(names.name())
    partition.records = records.memory_records([entry], timestamp=RECORD_TIMESTAMP)

    topic = message.TopicProduceData()
    topic.partition_data = [partition]

    request.acks = ACKS_ALL
    request.topic_data = [topic]


def populate_list_offsets(skeleton, names):
    request = _expect(skeleton, message.ListOffsetsRequestData)

    partition = message.ListOffsetsPartition()
    partition.partition_index = 0
    partition.current_leader_epoch = 1

    topic = message.ListOffsetsTopic()
    topic.name = names.name()
    topic.partitions = [partition]

    request.replica_id = ANY_REPLICA
    request.topics = [topic]


def populate_offset_fetch(skeleton, names):
    request = _expect(skeleton, message.OffsetFetchRequestData)

    topic = message.OffsetFetchRequestTopic()
    topic.name = names.name()
    topic.partition_indexes = [0, 1]

    request.group_id = names.name()
    request.topics = [topic]


def populate_metadata(skeleton, names):
    request = _expect(skeleton, message.MetadataRequestData)

    topic = message.MetadataRequestTopic()
    topic.name = names.name()
    topic.topic_id = names.uuid()

    request.topics = [topic]


def populate_update_metadata(skeleton, names):
    request = _expect(skeleton, message.UpdateMetadataRequestData)

    topic = message.UpdateMetadataTopicState()
    topic.topic_id = names.uuid()

    request.topic_states = [topic]


def populate_leave_group(skeleton, names):
    request = _expect(skeleton, message.LeaveGroupRequestData)

    member = message.MemberIdentity()
    member.member_id = names.name()

    request.members = [member]


def populate_describe_groups(skeleton, names):
    request = _expect(skeleton, message.DescribeGroupsRequestData)
    request.groups = [names.name(), names.name()]


def populate_consumer_group_describe(skeleton, names):
    request = _expect(skeleton, message.ConsumerGroupDescribeRequestData)
    request.group_ids = [names.name(), names.name()]


registry = types.MappingProxyType({
    ApiKey.PRODUCE: populate_produce,
    ApiKey.LIST_OFFSETS: populate_list_offsets,
    ApiKey.OFFSET_FETCH: populate_offset_fetch,
    ApiKey.METADATA: populate_metadata,
    ApiKey.UPDATE_METADATA: populate_update_metadata,
    ApiKey.LEAVE_GROUP: populate_leave_group,
    ApiKey.DESCRIBE_GROUPS: populate_describe_groups,
    ApiKey.CONSUMER_GROUP_DESCRIBE: populate_consumer_group_describe,
})


# Request types that are meaningful as default skeletons: either they have
# no collections at all, or an empty collection is a legitimate request
# (an incremental fetch with no topics, list groups with no state filter).

NO_POPULATOR = frozenset((
    ApiKey.FETCH,
    ApiKey.LEADER_AND_ISR,
    ApiKey.STOP_REPLICA,
    ApiKey.CONTROLLED_SHUTDOWN,
    ApiKey.FIND_COORDINATOR,
    ApiKey.JOIN_GROUP,
    ApiKey.HEARTBEAT,
    ApiKey.SYNC_GROUP,
    ApiKey.LIST_GROUPS,
    ApiKey.SASL_HANDSHAKE,
    ApiKey.API_VERSIONS,
    ApiKey.ADD_OFFSETS_TO_TXN,
    ApiKey.END_TXN,
    ApiKey.DESCRIBE_LOG_DIRS,
    ApiKey.SASL_AUTHENTICATE,
    ApiKey.CREATE_DELEGATION_TOKEN,
    ApiKey.RENEW_DELEGATION_TOKEN,
    ApiKey.EXPIRE_DELEGATION_TOKEN,
    ApiKey.DESCRIBE_DELEGATION_TOKEN,
    ApiKey.ALTER_PARTITION_REASSIGNMENTS,
    ApiKey.LIST_PARTITION_REASSIGNMENTS,
    ApiKey.OFFSET_DELETE,
    ApiKey.DESCRIBE_CLIENT_QUOTAS,
    ApiKey.VOTE,
    ApiKey.BEGIN_QUORUM_EPOCH,
    ApiKey.END_QUORUM_EPOCH,
    ApiKey.DESCRIBE_QUORUM,
    ApiKey.ALTER_PARTITION,
    ApiKey.UPDATE_FEATURES,
    ApiKey.ENVELOPE,
    ApiKey.FETCH_SNAPSHOT,
    ApiKey.DESCRIBE_CLUSTER,
    ApiKey.BROKER_REGISTRATION,
    ApiKey.BROKER_HEARTBEAT,
    ApiKey.UNREGISTER_BROKER,
    ApiKey.LIST_TRANSACTIONS,
    ApiKey.ALLOCATE_PRODUCER_IDS,
    ApiKey.CONSUMER_GROUP_HEARTBEAT,
    ApiKey.CONTROLLER_REGISTRATION,
    ApiKey.GET_TELEMETRY_SUBSCRIPTIONS,
    ApiKey.PUSH_TELEMETRY,
    ApiKey.ASSIGN_REPLICAS_TO_DIRS,
    ApiKey.LIST_CLIENT_METRICS_RESOURCES,
))


def resolve(api_key):
    """ Return the populator for *api_key*, or :func:`noop` if none is
        registered.
    """

    return registry.get(api_key, noop)


def unclassified():
    """ Return the set of api keys with no populator, no explicit no-op
        entry, and no exclusion.
    """

    classified = set(registry) | NO_POPULATOR | exclusions.EXCLUDED
    return set(ApiKey) - classified


def overlapping():
    """ Return the set of api keys classified more than once.
    """

    registered = set(registry)
    excluded = exclusions.EXCLUDED

    overlap = registered & NO_POPULATOR
    overlap |= NO_POPULATOR & excluded
    overlap |= registered & excluded
    return overlap


def _check():
    missing = unclassified()
    if missing:
        names = ', '.join(sorted(key.name for key in missing))
        raise RuntimeError('api keys with no populator decision: ' + names)

    doubled = overlapping()
    if doubled:
        names = ', '.join(sorted(key.name for key in doubled))
        raise RuntimeError('api keys classified more than once: ' + names)

_check()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
