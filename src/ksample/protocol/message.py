""" Mutable, schema-shaped representations of Kafka request bodies. Each
    class here is the skeleton for one request type: constructing it with no
    arguments yields the default (zero-valued) instance, the same thing a
    freshly decoded empty request would look like.

    Request types whose skeleton shape matters to callers are modelled
    field by field, whether or not a populator fills them in; every other
    request type is covered by :class:`GenericRequestData`.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple

from .. import json
from .apikeys import ApiKey


# Kafka's null topic id. A topic id of all zeros means "not set".

ZERO_UUID = uuid.UUID(int=0)


class RequestData:
    """ Base class for all request skeletons.

        :cvar api_key: The :class:`ApiKey` this skeleton represents.
        :cvar mandatory: Names of the top-level collections that must hold
            at least one entry for the request to be semantically
            non-trivial. A default skeleton leaves them empty; a populator
            is responsible for filling them.
    """

    api_key: ClassVar[ApiKey]
    mandatory: ClassVar[Tuple[str, ...]] = ()

    def to_dict(self) -> dict:
        """ Return the skeleton as plain Python builtins: UUIDs become
            strings, bytes become base64 text.
        """

        return json.builtins(self)


    def encapsulate(self) -> bytes:
        """ Return the JSON encoding of this skeleton.
        """

        return json.dumps(self)


    def empty_mandatory(self) -> List[str]:
        """ Return the names of any mandatory collections that are still
            empty (or None).
        """

        empty = list()
        for name in self.mandatory:
            if not getattr(self, name):
                empty.append(name)

        return empty


@dataclass
class GenericRequestData(RequestData):
    """ Skeleton for request types with no modelled body. """

    api_key: ApiKey


# Produce

@dataclass
class PartitionProduceData:
    index: int = 0
    records: Optional[bytes] = None


@dataclass
class TopicProduceData:
    name: str = ""
    partition_data: List[PartitionProduceData] = field(default_factory=list)


@dataclass
class ProduceRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.PRODUCE
    mandatory: ClassVar[Tuple[str, ...]] = ("topic_data",)

    transactional_id: Optional[str] = None
    acks: int = 0
    timeout_ms: int = 0
    topic_data: List[TopicProduceData] = field(default_factory=list)


# Fetch

@dataclass
class FetchPartition:
    partition: int = 0
    current_leader_epoch: int = -1
    fetch_offset: int = 0
    last_fetched_epoch: int = -1
    log_start_offset: int = -1
    partition_max_bytes: int = 0


@dataclass
class FetchTopic:
    topic: str = ""
    topic_id: uuid.UUID = ZERO_UUID
    partitions: List[FetchPartition] = field(default_factory=list)


@dataclass
class ForgottenTopic:
    topic: str = ""
    topic_id: uuid.UUID = ZERO_UUID
    partitions: List[int] = field(default_factory=list)


@dataclass
class FetchRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.FETCH

    # An empty topic list is a legitimate incremental fetch.

    replica_id: int = -1
    max_wait_ms: int = 0
    min_bytes: int = 0
    max_bytes: int = 0x7FFFFFFF
    isolation_level: int = 0
    session_id: int = 0
    session_epoch: int = -1
    topics: List[FetchTopic] = field(default_factory=list)
    forgotten_topics_data: List[ForgottenTopic] = field(default_factory=list)
    rack_id: str = ""


# ListOffsets

@dataclass
class ListOffsetsPartition:
    partition_index: int = 0
    current_leader_epoch: int = -1
    timestamp: int = 0


@dataclass
class ListOffsetsTopic:
    name: str = ""
    partitions: List[ListOffsetsPartition] = field(default_factory=list)


@dataclass
class ListOffsetsRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.LIST_OFFSETS
    mandatory: ClassVar[Tuple[str, ...]] = ("topics",)

    replica_id: int = 0
    isolation_level: int = 0
    topics: List[ListOffsetsTopic] = field(default_factory=list)


# Metadata

@dataclass
class MetadataRequestTopic:
    topic_id: uuid.UUID = ZERO_UUID
    name: Optional[str] = None


@dataclass
class MetadataRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.METADATA
    mandatory: ClassVar[Tuple[str, ...]] = ("topics",)

    topics: List[MetadataRequestTopic] = field(default_factory=list)
    allow_auto_topic_creation: bool = True
    include_cluster_authorized_operations: bool = False
    include_topic_authorized_operations: bool = False


# UpdateMetadata

@dataclass
class UpdateMetadataPartitionState:
    topic_name: str = ""
    partition_index: int = 0
    controller_epoch: int = 0
    leader: int = 0
    leader_epoch: int = 0
    isr: List[int] = field(default_factory=list)
    zk_version: int = 0
    replicas: List[int] = field(default_factory=list)
    offline_replicas: List[int] = field(default_factory=list)


@dataclass
class UpdateMetadataTopicState:
    topic_name: str = ""
    topic_id: uuid.UUID = ZERO_UUID
    partition_states: List[UpdateMetadataPartitionState] = field(default_factory=list)


@dataclass
class UpdateMetadataBroker:
    id: int = 0
    v0_host: str = ""
    v0_port: int = 0
    rack: Optional[str] = None


@dataclass
class UpdateMetadataRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.UPDATE_METADATA
    mandatory: ClassVar[Tuple[str, ...]] = ("topic_states",)

    controller_id: int = 0
    is_kraft_controller: bool = False
    controller_epoch: int = 0
    broker_epoch: int = -1
    ungrouped_partition_states: List[UpdateMetadataPartitionState] = field(default_factory=list)
    topic_states: List[UpdateMetadataTopicState] = field(default_factory=list)
    live_brokers: List[UpdateMetadataBroker] = field(default_factory=list)


# OffsetCommit

@dataclass
class OffsetCommitRequestPartition:
    partition_index: int = 0
    committed_offset: int = 0
    committed_leader_epoch: int = -1
    committed_metadata: Optional[str] = ""


@dataclass
class OffsetCommitRequestTopic:
    name: str = ""
    partitions: List[OffsetCommitRequestPartition] = field(default_factory=list)


@dataclass
class OffsetCommitRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.OFFSET_COMMIT
    mandatory: ClassVar[Tuple[str, ...]] = ("topics",)

    group_id: str = ""
    generation_id_or_member_epoch: int = -1
    member_id: str = ""
    group_instance_id: Optional[str] = None
    retention_time_ms: int = -1
    topics: List[OffsetCommitRequestTopic] = field(default_factory=list)


# OffsetFetch

@dataclass
class OffsetFetchRequestTopic:
    name: str = ""
    partition_indexes: List[int] = field(default_factory=list)


@dataclass
class OffsetFetchRequestGroup:
    group_id: str = ""
    member_id: Optional[str] = None
    member_epoch: int = -1
    topics: Optional[List[OffsetFetchRequestTopic]] = field(default_factory=list)


@dataclass
class OffsetFetchRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.OFFSET_FETCH
    mandatory: ClassVar[Tuple[str, ...]] = ("topics",)

    group_id: str = ""
    topics: Optional[List[OffsetFetchRequestTopic]] = field(default_factory=list)
    groups: List[OffsetFetchRequestGroup] = field(default_factory=list)
    require_stable: bool = False


# Group coordination

@dataclass
class FindCoordinatorRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.FIND_COORDINATOR

    key: str = ""
    key_type: int = 0
    coordinator_keys: List[str] = field(default_factory=list)


@dataclass
class JoinGroupRequestProtocol:
    name: str = ""
    metadata: bytes = b""


@dataclass
class JoinGroupRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.JOIN_GROUP

    group_id: str = ""
    session_timeout_ms: int = 0
    rebalance_timeout_ms: int = -1
    member_id: str = ""
    group_instance_id: Optional[str] = None
    protocol_type: str = ""
    protocols: List[JoinGroupRequestProtocol] = field(default_factory=list)
    reason: Optional[str] = None


@dataclass
class HeartbeatRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.HEARTBEAT

    group_id: str = ""
    generation_id: int = 0
    member_id: str = ""
    group_instance_id: Optional[str] = None


@dataclass
class MemberIdentity:
    member_id: str = ""
    group_instance_id: Optional[str] = None
    reason: Optional[str] = None


@dataclass
class LeaveGroupRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.LEAVE_GROUP
    mandatory: ClassVar[Tuple[str, ...]] = ("members",)

    group_id: str = ""
    member_id: str = ""
    members: List[MemberIdentity] = field(default_factory=list)


@dataclass
class SyncGroupRequestAssignment:
    member_id: str = ""
    assignment: bytes = b""


@dataclass
class SyncGroupRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.SYNC_GROUP

    group_id: str = ""
    generation_id: int = 0
    member_id: str = ""
    group_instance_id: Optional[str] = None
    protocol_type: Optional[str] = None
    protocol_name: Optional[str] = None
    assignments: List[SyncGroupRequestAssignment] = field(default_factory=list)


@dataclass
class DescribeGroupsRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.DESCRIBE_GROUPS
    mandatory: ClassVar[Tuple[str, ...]] = ("groups",)

    groups: List[str] = field(default_factory=list)
    include_authorized_operations: bool = False


@dataclass
class ListGroupsRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.LIST_GROUPS

    states_filter: List[str] = field(default_factory=list)


@dataclass
class DeleteGroupsRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.DELETE_GROUPS
    mandatory: ClassVar[Tuple[str, ...]] = ("groups_names",)

    groups_names: List[str] = field(default_factory=list)


@dataclass
class ConsumerGroupDescribeRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.CONSUMER_GROUP_DESCRIBE
    mandatory: ClassVar[Tuple[str, ...]] = ("group_ids",)

    group_ids: List[str] = field(default_factory=list)
    include_authorized_operations: bool = False


# Connection setup

@dataclass
class SaslHandshakeRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.SASL_HANDSHAKE

    mechanism: str = ""


@dataclass
class ApiVersionsRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.API_VERSIONS

    client_software_name: str = ""
    client_software_version: str = ""


# Topic administration

@dataclass
class CreatableReplicaAssignment:
    partition_index: int = 0
    broker_ids: List[int] = field(default_factory=list)


@dataclass
class CreatableTopicConfig:
    name: str = ""
    value: Optional[str] = None


@dataclass
class CreatableTopic:
    name: str = ""
    num_partitions: int = 0
    replication_factor: int = 0
    assignments: List[CreatableReplicaAssignment] = field(default_factory=list)
    configs: List[CreatableTopicConfig] = field(default_factory=list)


@dataclass
class CreateTopicsRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.CREATE_TOPICS
    mandatory: ClassVar[Tuple[str, ...]] = ("topics",)

    topics: List[CreatableTopic] = field(default_factory=list)
    timeout_ms: int = 60000
    validate_only: bool = False


@dataclass
class DeleteTopicState:
    name: Optional[str] = None
    topic_id: uuid.UUID = ZERO_UUID


@dataclass
class DeleteTopicsRequestData(RequestData):
    api_key: ClassVar[ApiKey] = ApiKey.DELETE_TOPICS
    mandatory: ClassVar[Tuple[str, ...]] = ("topics",)

    topics: List[DeleteTopicState] = field(default_factory=list)
    topic_names: List[str] = field(default_factory=list)
    timeout_ms: int = 0
