from datetime import datetime, timezone

from fix_arm_sdk.json import from_json, to_json, subtypes_of
from fix_arm_sdk.labservices.v2021_11_15_preview.models import (
    LabUpdate,
    LabUpdateProperties,
    OperationResult,
    OperationResultStatus,
    VirtualMachine,
    VirtualMachineState,
    VirtualMachineType,
)
from fix_arm_sdk.videoanalyzer.v2021_11_01_preview.models import (
    EncoderProcessor,
    EncoderSystemPreset,
    EncoderSystemPresetName,
    NodeInput,
    PipelineTopology,
    RtspSource,
    SourceNodeBase,
    UnsecuredEndpoint,
    UsernamePasswordCredentials,
    VideoSink,
    VideoSource,
)
from conftest import load_json


def test_read_resource() -> None:
    vm = from_json(load_json("labservices", "virtualMachine"), VirtualMachine)
    assert vm.name == "vm1"
    assert vm.system_data is not None
    assert vm.system_data.created_at == datetime(2021, 11, 18, 10, 40, 51, tzinfo=timezone.utc)
    assert vm.system_data.last_modified_at == datetime(2021, 11, 18, 10, 46, 30, tzinfo=timezone.utc)
    assert vm.properties is not None
    assert vm.properties.state is VirtualMachineState.RUNNING
    assert vm.properties.vm_type is VirtualMachineType.USER
    assert vm.properties.claimed_by_user_id == "user1"
    assert vm.properties.connection_profile is not None
    assert vm.properties.connection_profile.ssh_authority == "lab1.eastus2.cloudapp.azure.com:50000"


def test_write_resource() -> None:
    js = load_json("labservices", "virtualMachine")
    # reading and writing does not lose or add any information
    assert to_json(from_json(js, VirtualMachine)) == js


def test_absent_properties_are_not_written() -> None:
    update = LabUpdate(properties=LabUpdateProperties(title="Intro to Python"))
    assert to_json(update) == {"properties": {"title": "Intro to Python"}}


def test_nested_error_details() -> None:
    result = from_json(load_json("labservices", "operationResult"), OperationResult)
    assert result.status is OperationResultStatus.FAILED
    assert result.percent_complete == 100.0
    assert result.error is not None
    assert result.error.code == "QuotaExceeded"
    assert result.error.details is not None
    assert result.error.details[0].code == "CoreQuota"


def test_unknown_enum_value_is_kept() -> None:
    vms = load_json("labservices", "virtualMachines")
    js = vms["value"][1]
    vm = from_json(js, VirtualMachine)
    assert vm.properties is not None
    state = vm.properties.state
    assert state is not None
    assert state.is_unknown
    assert state == "Hibernated"
    assert to_json(vm)["properties"]["state"] == "Hibernated"


def test_read_polymorphic_nodes() -> None:
    topology = from_json(load_json("videoanalyzer", "pipelineTopology"), PipelineTopology)
    assert topology.properties is not None
    rtsp, video, unknown = topology.properties.sources or []

    assert isinstance(rtsp, RtspSource)
    assert isinstance(rtsp.endpoint, UnsecuredEndpoint)
    assert rtsp.endpoint.url == "${rtspUrlParameter}"
    assert isinstance(rtsp.endpoint.credentials, UsernamePasswordCredentials)
    assert rtsp.endpoint.credentials.username == "username"

    assert isinstance(video, VideoSource)
    assert video.video_name == "camera001"

    # unknown discriminator: read as base class, the wire value is not lost
    assert type(unknown) is SourceNodeBase
    assert unknown.type == "#Microsoft.VideoAnalyzer.HologramSource"
    assert unknown.name == "hologramSource"

    encoder = (topology.properties.processors or [])[0]
    assert isinstance(encoder, EncoderProcessor)
    assert isinstance(encoder.preset, EncoderSystemPreset)
    assert encoder.preset.name is EncoderSystemPresetName.SINGLE_LAYER_540P_H264_AAC
    sink = (topology.properties.sinks or [])[0]
    assert isinstance(sink, VideoSink)
    assert sink.video_creation_properties is not None
    assert sink.video_creation_properties.segment_length == "PT30S"


def test_write_polymorphic_nodes() -> None:
    js = load_json("videoanalyzer", "pipelineTopology")
    assert to_json(from_json(js, PipelineTopology)) == js


def test_discriminator_written_for_subclass() -> None:
    credentials = UsernamePasswordCredentials(username="user", password="pw")
    source = RtspSource(name="rtsp", endpoint=UnsecuredEndpoint(url="rtsp://camera:554", credentials=credentials))
    assert to_json(source) == {
        "@type": "#Microsoft.VideoAnalyzer.RtspSource",
        "name": "rtsp",
        "endpoint": {
            "@type": "#Microsoft.VideoAnalyzer.UnsecuredEndpoint",
            "url": "rtsp://camera:554",
            "credentials": {
                "@type": "#Microsoft.VideoAnalyzer.UsernamePasswordCredentials",
                "username": "user",
                "password": "pw",
            },
        },
    }
    sink = VideoSink(name="sink", inputs=[NodeInput(node_name="rtsp")], video_name="video1")
    assert to_json(sink)["inputs"] == [{"nodeName": "rtsp"}]


def test_subtypes() -> None:
    assert subtypes_of(SourceNodeBase) == {
        "#Microsoft.VideoAnalyzer.RtspSource": RtspSource,
        "#Microsoft.VideoAnalyzer.VideoSource": VideoSource,
    }
    assert subtypes_of(VirtualMachine) == {}

