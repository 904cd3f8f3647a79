import sys
from types import ModuleType
from typing import Any, Dict

from fix_arm_sdk.json import from_json, to_json
from tools.arm_model_gen import (
    ArmSwagger,
    member_name,
    py_name,
    render_client,
    render_models,
    render_operations,
)

Json = Dict[str, Any]

node: Json = {
    "type": "object",
    "discriminator": "@type",
    "properties": {
        "@type": {"type": "string", "description": "The discriminator for derived types."},
        "name": {"type": "string", "description": "Node name."},
    },
}
camera: Json = {
    "x-ms-discriminator-value": "#Example.Camera",
    "allOf": [dict(node, ref="WidgetNode")],
    "properties": {"url": {"type": "string", "description": "Url of the 'camera'."}},
}
widget_properties: Json = {
    "properties": {
        "state": {
            "type": "string",
            "enum": ["Running", "Stopped"],
            "x-ms-enum": {"name": "WidgetState", "modelAsString": True},
            "description": "The state of the widget.",
        },
        "createdAt": {"type": "string", "format": "date-time"},
        "nodes": {"type": "array", "items": dict(node, ref="WidgetNode")},
        "privateIPAddress": {"type": "string"},
        "labels": {"type": "object", "additionalProperties": {"type": "string"}},
    }
}
widget: Json = {
    "properties": {
        "id": {"type": "string", "readOnly": True},
        "properties": dict(widget_properties, ref="WidgetProperties"),
    }
}
widget_list: Json = {
    "properties": {
        "value": {"type": "array", "items": dict(widget, ref="Widget")},
        "nextLink": {"type": "string"},
    }
}
subscription = {"name": "subscriptionId", "in": "path", "required": True, "type": "string"}
api_version = {"name": "api-version", "in": "query", "required": True, "type": "string"}
widget_name = {"name": "widgetName", "in": "path", "required": True, "type": "string"}
swagger: Json = {
    "info": {"title": "Widget Client", "version": "2022-01-01"},
    "definitions": {
        "CameraNode": camera,
        "Widget": widget,
        "WidgetList": widget_list,
        "WidgetNode": node,
        "WidgetProperties": widget_properties,
    },
    "paths": {
        "/subscriptions/{subscriptionId}/providers/Example.Widgets/widgets": {
            "get": {
                "operationId": "Widgets_ListBySubscription",
                "description": "List all widgets of a subscription.",
                "parameters": [
                    subscription,
                    api_version,
                    {"name": "$filter", "in": "query", "type": "string"},
                    {"name": "$top", "in": "query", "type": "integer"},
                ],
                "responses": {"200": {"schema": dict(widget_list, ref="WidgetList")}, "default": {}},
                "x-ms-pageable": {"nextLinkName": "nextLink"},
            }
        },
        "/subscriptions/{subscriptionId}/providers/Example.Widgets/widgets/{widgetName}": {
            "parameters": [subscription, widget_name],
            "put": {
                "operationId": "Widgets_CreateOrUpdate",
                "parameters": [api_version, {"name": "body", "in": "body", "schema": dict(widget, ref="Widget")}],
                "responses": {
                    "200": {"schema": dict(widget, ref="Widget")},
                    "201": {"schema": dict(widget, ref="Widget")},
                },
            },
            "delete": {
                "operationId": "Widgets_Delete",
                "parameters": [api_version],
                "responses": {"200": {}, "204": {}},
            },
        },
    },
}


def collected() -> ArmSwagger:
    result = ArmSwagger([swagger])
    result.collect()
    return result


def test_names() -> None:
    assert py_name("@type") == "type"
    assert py_name("privateIPAddress") == "private_ip_address"
    assert py_name("$filter") == "filter"
    assert py_name("from") == "from_"
    assert member_name("SingleLayer_540p_H264_AAC") == "SINGLE_LAYER_540P_H264_AAC"
    assert member_name("Standard_LRS") == "STANDARD_LRS"
    assert member_name("1080p") == "VALUE_1080P"


def test_collect() -> None:
    model = collected()
    assert list(model.enums) == ["WidgetState"]
    assert model.enums["WidgetState"].values == ["Running", "Stopped"]
    assert set(model.classes) == {"CameraNode", "Widget", "WidgetList", "WidgetNode", "WidgetProperties"}
    assert model.classes["CameraNode"].bases == ["WidgetNode"]
    assert model.classes["WidgetNode"].discriminator == "@type"
    assert model.subtypes("WidgetNode") == {"#Example.Camera": "CameraNode"}
    # base classes are rendered before their subclasses
    assert [c.name for c in model.sorted_classes()][:2] == ["WidgetNode", "CameraNode"]
    ops = {op.name: op for op in model.operations["Widgets"]}
    assert set(ops) == {"list_by_subscription", "create_or_update", "delete"}
    assert ops["list_by_subscription"].pageable == ("WidgetList", "Widget")
    assert ops["list_by_subscription"].query_parameters == {"filter": ("$filter", "str"), "top": ("$top", "int")}
    assert ops["create_or_update"].path.endswith("/widgets/{widget_name}")
    assert ops["create_or_update"].return_type == "ArmResponse[Widget]"
    assert ops["delete"].responses == {200: None, 204: None}


def test_render_models() -> None:
    code = render_models(collected())
    assert "class WidgetState(ExpandableEnum):" in code
    assert '    """The state of the widget."""' in code
    assert '    RUNNING = "Running"' in code
    assert "class CameraNode(WidgetNode):" in code
    assert 'type: Optional[str] = field(default="#Example.Camera", metadata={"json_name": "@type", "discriminator": True})' in code  # fmt: skip
    assert 'metadata={"description": "Url of the camera ."}' in code
    assert 'private_ip_address: Optional[str] = field(default=None, metadata={"json_name": "privateIPAddress"})' in code
    assert "labels: Optional[Dict[str, str]]" in code
    assert 'register_subtypes(WidgetNode, "@type", {"#Example.Camera": CameraNode})' in code

    # the generated code is valid and usable
    module = ModuleType("generated_widget_models")
    sys.modules[module.__name__] = module
    exec(compile(code, module.__name__, "exec"), module.__dict__)
    js = {
        "id": "w1",
        "properties": {
            "state": "Paused",
            "createdAt": "2022-01-01T12:00:00Z",
            "nodes": [{"@type": "#Example.Camera", "name": "cam", "url": "rtsp://camera"}],
            "privateIPAddress": "10.0.0.1",
        },
    }
    loaded = from_json(js, module.Widget)
    assert isinstance(loaded.properties.nodes[0], module.CameraNode)
    assert loaded.properties.state.is_unknown
    assert to_json(loaded) == js


def test_render_operations() -> None:
    code = render_operations(collected(), "widgets", "2022-01-01", "fix_arm_sdk.widgets.v2022_01_01")
    assert 'ApiVersion = "2022-01-01"' in code
    assert 'service="widgets",' in code
    assert "from fix_arm_sdk.widgets.v2022_01_01.models import (\n    Widget,\n    WidgetList,\n)" in code
    assert "class WidgetsOperations(OperationGroup):" in code
    assert '        "/subscriptions/{subscription_id}/providers/Example.Widgets/widgets",\n' in code
    assert '        {"filter": "$filter", "top": "$top"},\n' in code
    assert "        *,\n        filter: Optional[str] = None,\n        top: Optional[int] = None,\n" in code
    assert "    ) -> Pageable[WidgetList, Widget]:\n" in code
    assert '        """List all widgets of a subscription."""\n        return self.client.pageable(\n' in code
    assert "        body: Widget,\n    ) -> ArmResponse[Widget]:\n" in code
    assert "        {200: NoBody, 204: NoBody},\n" in code
    # the rendered operations module compiles
    compile(code, "operations", "exec")


def test_render_client() -> None:
    code = render_client(collected(), "WidgetClient", "Widget Client", "2022-01-01", "fix_arm_sdk.widgets.v2022_01_01")
    assert "class WidgetClient(ArmServiceClient):" in code
    assert "        self.widgets = WidgetsOperations(client)\n" in code
    compile(code, "client", "exec")
