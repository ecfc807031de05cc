""" Request types left out of default sample generation.

    These request types report failures per nested entry (per topic, per
    group, per resource) rather than with a single top-level error code, so
    one generically populated instance cannot exercise their decode paths
    faithfully; they need hand-written samples. Entries should be removed
    as dedicated populators are written for them.

    Excluded request types can still be requested explicitly, in which case
    they get whatever populator is registered for them, usually none.
"""

from .protocol.apikeys import ApiKey


EXCLUDED = frozenset((
    ApiKey.DELETE_GROUPS,
    ApiKey.OFFSET_COMMIT,
    ApiKey.CREATE_TOPICS,
    ApiKey.DELETE_TOPICS,
    ApiKey.DELETE_RECORDS,
    ApiKey.INIT_PRODUCER_ID,
    ApiKey.CREATE_ACLS,
    ApiKey.DESCRIBE_ACLS,
    ApiKey.DELETE_ACLS,
    ApiKey.OFFSET_FOR_LEADER_EPOCH,
    ApiKey.ELECT_LEADERS,
    ApiKey.ADD_PARTITIONS_TO_TXN,
    ApiKey.WRITE_TXN_MARKERS,
    ApiKey.TXN_OFFSET_COMMIT,
    ApiKey.DESCRIBE_CONFIGS,
    ApiKey.ALTER_CONFIGS,
    ApiKey.INCREMENTAL_ALTER_CONFIGS,
    ApiKey.ALTER_REPLICA_LOG_DIRS,
    ApiKey.CREATE_PARTITIONS,
    ApiKey.ALTER_CLIENT_QUOTAS,
    ApiKey.DESCRIBE_USER_SCRAM_CREDENTIALS,
    ApiKey.ALTER_USER_SCRAM_CREDENTIALS,
    ApiKey.DESCRIBE_PRODUCERS,
    ApiKey.DESCRIBE_TRANSACTIONS,
    ApiKey.DESCRIBE_TOPIC_PARTITIONS,
))


def is_excluded(api_key):
    return api_key in EXCLUDED


def default_identifiers():
    """ Return every :class:`ApiKey` not in :data:`EXCLUDED`, in wire id
        order, as a tuple.
    """

    return tuple(key for key in ApiKey if key not in EXCLUDED)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
