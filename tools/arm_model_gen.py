from __future__ import annotations

import argparse
import keyword
import re
from collections.abc import Sequence, MutableSequence, Mapping, MutableMapping
from pathlib import Path
from typing import Dict, List, Optional, Set, Any, Tuple

from attr import define
from jsons import pascalcase
from prance import ResolvingParser
from prance.util.resolver import RefResolver
from prance.util.url import ResolutionError

from fix_arm_sdk.utils import to_camel, to_snake

Json = Dict[str, Any]
MaxLine = 120

simple_type_map = {
    "string": "str",
    "boolean": "bool",
    "integer": "int",
    "number": "float",
}


def clean_description(description: Optional[str]) -> str:
    desc = re.sub("[\n\r'\"\\\\]", " ", description or "")  # remove invalid characters
    desc = re.sub("<br\\s*/?>", " ", desc)  # replace <br/> tags
    desc = re.sub("\\s\\s+", " ", desc)  # remove multiple spaces
    return desc.strip()


def first_line(description: Optional[str]) -> str:
    return clean_description((description or "").strip().split("\n")[0])


def class_name(name: str) -> str:
    return re.sub("[^A-Za-z0-9_]", "", name)


def py_name(wire_name: str) -> str:
    name = to_snake(re.sub("[^A-Za-z0-9_]", "", wire_name))
    return name + "_" if keyword.iskeyword(name) else name


def member_name(value: str) -> str:
    name = re.sub("_+", "_", to_snake(re.sub("[^A-Za-z0-9]+", "_", value))).strip("_").upper()
    return name if name and not name[0].isdigit() else f"VALUE_{name}"


def ref_name(shape: Json) -> Optional[str]:
    # resolved references keep the name of the definition in "ref", unresolved ones still have "$ref"
    if isinstance(ref := shape.get("ref"), str):
        return class_name(ref)
    elif isinstance(ref := shape.get("$ref"), str):
        return class_name(ref.split("/")[-1])
    return None


def simple_shape(s: Json) -> Optional[str]:
    if s.get("type") == "string" and s.get("format") == "date-time":
        return "datetime"
    return simple_type_map.get(s.get("type"))  # type: ignore


def is_complex_type(s: Json) -> bool:
    return (s.get("type") == "object" or "allOf" in s) or "properties" in s


def fmt_skip(line: str) -> str:
    return line + "  # fmt: skip" if len(line) > MaxLine else line


def call(name: str, args: List[str], indent: str = "", explode: bool = False) -> str:
    """
    Render a call the way black would: on one line if it fits, otherwise one argument per line.
    """
    single = f"{indent}{name}({', '.join(args)})"
    if not explode and len(single) <= MaxLine:
        return single
    inner = "".join(f"{indent}    {arg},\n" for arg in args)
    return f"{indent}{name}(\n{inner}{indent})"


@define
class ArmProperty:
    name: str
    wire_name: str
    type: str
    description: str = ""
    discriminator: bool = False
    default: Optional[str] = None

    def to_line(self) -> str:
        metadata: List[str] = []
        if desc := clean_description(self.description):
            metadata.append(f'"description": "{desc}"')
        if to_camel(self.name) != self.wire_name:
            metadata.append(f'"json_name": "{self.wire_name}"')
        if self.discriminator:
            metadata.append('"discriminator": True')
        default = f'"{self.default}"' if self.default else "None"
        md = f", metadata={{{', '.join(metadata)}}}" if metadata else ""
        return fmt_skip(f"    {self.name}: Optional[{self.type}] = field(default={default}{md})")


@define
class ArmEnum:
    name: str
    values: List[str]
    description: str = ""

    def to_class(self) -> str:
        doc = f'    """{desc}"""\n\n' if (desc := first_line(self.description)) else ""
        members: Dict[str, str] = {}
        for value in self.values:
            members.setdefault(member_name(value), value)
        body = "\n".join(f'    {name} = "{value}"' for name, value in members.items())
        return f"class {self.name}(ExpandableEnum):\n{doc}{body}\n"


@define
class ArmClassModel:
    name: str
    bases: List[str]
    props: List[ArmProperty]
    # wire name of the discriminator, if this class is the base of a polymorphic hierarchy
    discriminator: Optional[str] = None
    discriminator_value: Optional[str] = None

    def to_class(self) -> str:
        base = f"({', '.join(self.bases)})" if self.bases else ""
        body = "\n".join(p.to_line() for p in self.props) or "    pass"
        return f"@define\nclass {self.name}{base}:\n{body}\n"


@define
class ArmOperationModel:
    group: str
    name: str
    method: str
    path: str
    description: str
    path_parameters: List[str]
    required_query: List[str]
    # python name -> (wire name, python type)
    query_parameters: Dict[str, Tuple[str, str]]
    # python name and type of the request body
    body: Optional[Tuple[str, str]]
    responses: Dict[int, Optional[str]]
    # page type and item type of a pageable operation
    pageable: Optional[Tuple[str, str]] = None

    @property
    def return_type(self) -> str:
        if self.pageable:
            return f"Pageable[{self.pageable[0]}, {self.pageable[1]}]"
        body_type = next((t for t in self.responses.values() if t is not None), None)
        if len(self.responses) == 1:
            return body_type or "None"
        return f"ArmResponse[{body_type or 'None'}]"

    def spec_attribute(self) -> str:
        responses = ", ".join(f"{code}: {tpe or 'NoBody'}" for code, tpe in self.responses.items())
        args = [f'"{self.method.upper()}"', f'"{self.path}"', f"{{{responses}}}"]
        if self.query_parameters:
            args.append("{" + ", ".join(f'"{k}": "{w}"' for k, (w, _) in self.query_parameters.items()) + "}")
        if self.body:
            args.append(f"body={self.body[1]}")
        return call(f"{self.name}_spec: ClassVar[ArmOperation] = spec", args, indent="    ", explode=True)

    def method_def(self) -> str:
        params = ["self"] + [f"{p}: str" for p in self.path_parameters]
        params += [f"{p}: {self.query_parameters[p][1]}" for p in self.required_query]
        if self.body:
            params.append(f"{self.body[0]}: {self.body[1]}")
        optional = [p for p in self.query_parameters if p not in self.required_query]
        if optional:
            params.append("*")
            params += [f"{p}: Optional[{self.query_parameters[p][1]}] = None" for p in optional]
        arguments = [f"{p}={p}" for p in self.path_parameters + list(self.query_parameters)]
        doc = f'        """{desc}"""\n' if (desc := first_line(self.description)) else ""
        if self.pageable:
            prefix = "def"
            invoke = call(
                "return self.client.pageable",
                [f"self.{self.name}_spec", self.pageable[0]] + arguments,
                indent="        ",
                explode=True,
            )
        else:
            prefix = "async def"
            args = [f"self.{self.name}_spec"] + ([self.body[0]] if self.body else []) + arguments
            result = "return await" if self.return_type != "None" else "await"
            invoke = call(f"{result} self.client.call", args, indent="        ", explode=True)
        signature = call(f"{prefix} {self.name}", params, indent="    ", explode=True)
        return f"{signature} -> {self.return_type}:\n{doc}{invoke}\n"


class ArmSwagger:
    """
    Collects enums, model classes and operations of one or more swagger files of the same api version.
    """

    def __init__(self, specs: List[Json]) -> None:
        self.definitions: Json = {}
        self.paths: Json = {}
        for spec in specs:
            self.definitions.update({class_name(k): v for k, v in spec.get("definitions", {}).items()})
            self.paths.update(spec.get("paths", {}))
        self.enums: Dict[str, ArmEnum] = {}
        self.classes: Dict[str, ArmClassModel] = {}
        self.operations: Dict[str, List[ArmOperationModel]] = {}
        self.__building: Set[str] = set()

    def add_enum(self, owner: str, wire_name: str, shape: Json) -> str:
        ms_enum = shape.get("x-ms-enum", {})
        name = class_name(ms_enum.get("name") or (owner + pascalcase(py_name(wire_name))))
        if name not in self.enums:
            values = [v["value"] for v in ms_enum["values"]] if "values" in ms_enum else shape["enum"]
            self.enums[name] = ArmEnum(name, [str(v) for v in values], shape.get("description", ""))
        return name

    def prop_type(self, owner: str, wire_name: str, shape: Json) -> str:
        if "enum" in shape and shape.get("type", "string") == "string":
            return self.add_enum(owner, wire_name, shape)
        elif simple := simple_shape(shape):
            return simple
        elif ref := ref_name(shape):
            self.add_class(ref, self.definitions.get(ref, shape))
            return ref
        elif shape.get("type") == "array":
            return f"List[{self.prop_type(owner, wire_name, shape.get('items', {}))}]"
        elif isinstance(values := shape.get("additionalProperties"), dict) and values:
            return f"Dict[str, {self.prop_type(owner, wire_name, values)}]"
        elif "properties" in shape or "allOf" in shape:
            name = owner + pascalcase(py_name(wire_name))
            self.add_class(name, shape)
            return name
        else:
            return "Any"

    def discriminator_of(self, bases: List[str]) -> Optional[str]:
        for base in bases:
            if cls := self.classes.get(base):
                if cls.discriminator:
                    return cls.discriminator
                if found := self.discriminator_of(cls.bases):
                    return found
        return None

    def add_class(self, name: str, shape: Json) -> None:
        if name in self.classes or name in self.__building:
            return
        self.__building.add(name)
        bases: List[str] = []
        for base in shape.get("allOf", []):
            if base_name := ref_name(base):
                self.add_class(base_name, self.definitions.get(base_name, base))
                bases.append(base_name)
        discriminator = shape.get("discriminator")
        props: List[ArmProperty] = []
        for wire_name, prop_shape in shape.get("properties", {}).items():
            description = prop_shape.get("description", "")
            if wire_name == discriminator:
                props.append(ArmProperty(py_name(wire_name), wire_name, "str", description, discriminator=True))
            else:
                prop_type = self.prop_type(name, wire_name, prop_shape)
                props.append(ArmProperty(py_name(wire_name), wire_name, prop_type, description))
        value = shape.get("x-ms-discriminator-value")
        if value and (inherited := self.discriminator_of(bases)):
            props.insert(0, ArmProperty(py_name(inherited), inherited, "str", discriminator=True, default=value))
        self.classes[name] = ArmClassModel(name, bases, props, discriminator, value)

    def subtypes(self, base: str) -> Dict[str, str]:
        result: Dict[str, str] = {}
        for cls in self.classes.values():
            if base in cls.bases:
                if cls.discriminator_value:
                    result[cls.discriminator_value] = cls.name
                result.update(self.subtypes(cls.name))
        return dict(sorted(result.items()))

    def sorted_classes(self) -> List[ArmClassModel]:
        # base classes have to be defined before their subclasses
        done: Dict[str, ArmClassModel] = {}

        def add(cls: ArmClassModel) -> None:
            if cls.name not in done:
                for base in cls.bases:
                    if base in self.classes:
                        add(self.classes[base])
                done[cls.name] = cls

        for name in sorted(self.classes):
            add(self.classes[name])
        return list(done.values())

    def collect(self) -> None:
        for name, shape in self.definitions.items():
            if "enum" in shape and shape.get("type", "string") == "string":
                self.add_enum(name, name, shape)
            elif is_complex_type(shape):
                self.add_class(name, shape)
        for path, path_spec in self.paths.items():
            common = path_spec.get("parameters", [])
            for method in ("get", "put", "patch", "post", "delete", "head"):
                if (op := path_spec.get(method)) is not None:
                    model = self.operation(path, method, op, common + op.get("parameters", []))
                    self.operations.setdefault(model.group, []).append(model)

    def operation(self, path: str, method: str, op: Json, parameters: List[Json]) -> ArmOperationModel:
        group, _, op_name = op["operationId"].partition("_")
        path_params: List[str] = []
        required_query: List[str] = []
        query: Dict[str, Tuple[str, str]] = {}
        body: Optional[Tuple[str, str]] = None
        for param in parameters:
            wire_name, location = param.get("name", ""), param.get("in")
            if wire_name == "api-version":
                continue
            name = py_name(wire_name)
            if location == "path":
                path = path.replace(f"{{{wire_name}}}", f"{{{name}}}")
                path_params.append(name)
            elif location == "query":
                query[name] = (wire_name, simple_shape(param) or "str")
                if param.get("required", False):
                    required_query.append(name)
            elif location == "body":
                body = (name, self.prop_type(group, wire_name, param.get("schema", {})))
        responses: Dict[int, Optional[str]] = {}
        for code, response in op.get("responses", {}).items():
            if code.isdigit():
                schema = response.get("schema")
                responses[int(code)] = self.prop_type(group, op_name, schema) if schema else None
        pageable: Optional[Tuple[str, str]] = None
        if (paging := op.get("x-ms-pageable")) and paging.get("nextLinkName") and (page := responses.get(200)):
            items = value_shape(op["responses"]["200"]["schema"], paging.get("itemName", "value"))
            pageable = (page, self.prop_type(page, "value", items))
        return ArmOperationModel(
            group,
            to_snake(op_name),
            method,
            path,
            op.get("description") or op.get("summary", ""),
            path_params,
            required_query,
            query,
            body,
            responses,
            pageable,
        )


def value_shape(schema: Json, item_name: str) -> Json:
    shapes = [schema] + schema.get("allOf", [])
    for shape in shapes:
        if item_name in shape.get("properties", {}):
            items: Json = shape["properties"][item_name].get("items", {})
            return items
    return {}


def group_class_name(group: str) -> str:
    return "Operations" if group == "Operations" else f"{class_name(group)}Operations"


def render_models(swagger: ArmSwagger) -> str:
    classes = swagger.sorted_classes()
    body = "\n\n".join([e.to_class() for e in swagger.enums.values()] + [c.to_class() for c in classes])
    polymorphic = [c for c in classes if c.discriminator and swagger.subtypes(c.name)]
    registrations = []
    for cls in polymorphic:
        subtypes = swagger.subtypes(cls.name)
        mapping = "{" + ", ".join(f'"{k}": {v}' for k, v in subtypes.items()) + "}"
        args = [cls.name, f'"{cls.discriminator}"', mapping]
        rendered = call("register_subtypes", args)
        if "\n" in rendered and len(f"    {', '.join(args)}") > MaxLine:
            exploded = "{\n" + "".join(f'        "{k}": {v},\n' for k, v in subtypes.items()) + "    }"
            rendered = f'register_subtypes(\n    {cls.name},\n    "{cls.discriminator}",\n    {exploded},\n)'
        elif "\n" in rendered:
            rendered = f"register_subtypes(\n    {', '.join(args)}\n)"
        registrations.append(rendered)

    typing = [t for t in ("Any", "Dict", "List") if re.search(f"\\b{t}\\[|\\[{t}\\]|Optional\\[{t}\\]", body)]
    header = "from __future__ import annotations\n\n"
    if "datetime" in body:
        header += "from datetime import datetime\n"
    header += f"from typing import {', '.join(typing + ['Optional'])}\n\n"
    header += "from attr import define, field\n\n"
    if swagger.enums:
        header += "from fix_arm_sdk.enums import ExpandableEnum\n"
    if registrations:
        header += "from fix_arm_sdk.json import register_subtypes\n"
    footer = ("\n\n" + "\n".join(registrations)) if registrations else ""
    return f"{header}\n\n{body}{footer}\n"


def render_operations(swagger: ArmSwagger, service: str, version: str, module: str) -> str:
    groups = []
    used: Set[str] = set()
    for group, operations in sorted(swagger.operations.items()):
        specs = "\n".join(op.spec_attribute() for op in operations)
        methods = "\n".join(op.method_def() for op in operations)
        groups.append(f"class {group_class_name(group)}(OperationGroup):\n{specs}\n\n{methods}")
        for op in operations:
            names = re.findall("[A-Za-z_][A-Za-z0-9_]*", op.return_type + " " + (op.body[1] if op.body else ""))
            names += [t for t in op.responses.values() if t]
            used.update(n for n in names if n in swagger.classes or n in swagger.enums)
    paged = any(op.pageable for ops in swagger.operations.values() for op in ops)
    models = "".join(f"    {name},\n" for name in sorted(used))
    header = "from __future__ import annotations\n\n"
    header += "from typing import ClassVar, Dict, Optional\n\n"
    header += "from fix_arm_sdk.arm_client import ArmOperation, ArmResponse, NoBody, OperationGroup\n"
    if used:
        header += f"from {module}.models import (\n{models})\n"
    if paged:
        header += "from fix_arm_sdk.pager import Pageable\n"
    helper = f'''ApiVersion = "{version}"


def spec(
    method: str,
    path: str,
    responses: Optional[Dict[int, Optional[type]]] = None,
    query_parameters: Optional[Dict[str, str]] = None,
    body: Optional[type] = None,
) -> ArmOperation:
    return ArmOperation(
        service="{service}",
        method=method,
        path=path,
        version=ApiVersion,
        responses=responses or {{200: NoBody}},
        query_parameters=query_parameters or {{}},
        body=body,
    )
'''
    return header + "\n" + helper + "\n\n" + "\n\n".join(groups)


def render_client(swagger: ArmSwagger, client: str, title: str, version: str, module: str) -> str:
    groups = sorted(swagger.operations)
    imports = "".join(f"    {group_class_name(g)},\n" for g in sorted(groups, key=group_class_name))
    attributes = "".join(f"        self.{to_snake(g)} = {group_class_name(g)}(client)\n" for g in groups)
    return (
        "from fix_arm_sdk.arm_client import ArmClient, ArmServiceClient\n"
        f"from {module}.operations import (\n{imports})\n\n\n"
        f"class {client}(ArmServiceClient):\n"
        f'    """{clean_description(title)} with api version {version}."""\n\n'
        "    def __init__(self, client: ArmClient) -> None:\n"
        "        super().__init__(client)\n"
        f"{attributes}"
    )


def generate(files: List[Path], service: str, target: Path, client: Optional[str] = None) -> None:
    specs = [ResolvingRefParser(str(file)).specification for file in files]
    version = specs[0]["info"]["version"]
    title = specs[0]["info"].get("title", service)
    client_name = client or class_name(pascalcase(title.replace(" ", "_")))
    client_name = client_name if client_name.endswith("Client") else client_name + "Client"
    swagger = ArmSwagger(specs)
    swagger.collect()

    package = target / service / ("v" + re.sub("[^A-Za-z0-9]", "_", version))
    module = ".".join(package.parts)
    package.mkdir(parents=True, exist_ok=True)
    for init in (package.parent / "__init__.py", package / "__init__.py"):
        if not init.exists():
            init.write_text("")
    (package / "models.py").write_text(render_models(swagger))
    (package / "operations.py").write_text(render_operations(swagger, service, version, module))
    (package / "client.py").write_text(render_client(swagger, client_name, title, version, module))
    print(
        f"{module}: {len(swagger.enums)} enums, {len(swagger.classes)} models, "
        f"{sum(len(o) for o in swagger.operations.values())} operations in {len(swagger.operations)} groups"
    )


# region keep resolver
class RefKeepResolver(RefResolver):
    def _resolve_partial(self, base_url, partial, recursions):  # type: ignore
        changes = dict(tuple(self._dereferencing_iterator(base_url, partial, (), recursions)))
        paths = sorted(changes.keys(), key=len)
        for path in paths:
            value = changes[path]
            if len(path) == 0:
                partial = value
            else:
                # noinspection PyTypeChecker
                path_set(partial, list(path), value)

        return partial

    def _dereferencing_iterator(self, base_url, partial, path, recursions):  # type: ignore
        try:
            yield from super()._dereferencing_iterator(base_url, partial, path, recursions)
        except ResolutionError as e:
            if Debug:
                print(">>>>> Can not resolve reference. Keep it: ", e)


class ResolvingRefParser(ResolvingParser):  # type: ignore
    def __init__(self, url=None, spec_string=None, lazy=False, **kwargs):  # type: ignore
        self.__reference_cache: Json = {}
        super().__init__(url, spec_string, lazy, **kwargs)

    def _validate(self):  # type: ignore
        forward_arg_names = (
            "encoding",
            "recursion_limit",
            "recursion_limit_handler",
            "resolve_types",
            "resolve_method",
            "strict",
        )
        forward_args = {k: v for (k, v) in self.options.items() if k in forward_arg_names}
        resolver = RefKeepResolver(
            self.specification,
            self.url,
            reference_cache=self.__reference_cache,
            recursion_limit=1,
            **forward_args,
        )
        resolver.resolve_references()
        self.specification = resolver.specs
        # swagger files of the rest api specs are not always valid: do not validate.


def path_set(obj: Any, path: List[Any], value: Any) -> Any:
    """
    Set the resolved value at the given path.
    A resolved object remembers the name of the definition it was resolved from in "ref".
    """

    def remember_ref(existing: Any) -> None:
        if isinstance(value, MutableMapping):
            if isinstance(existing, MutableMapping) and "$ref" in existing:
                value["ref"] = existing["$ref"].split("/")[-1]
            value["full_ref"] = existing

    if path is None or not isinstance(path, Sequence) or len(path) < 1:
        raise KeyError("Cannot set with an empty path!")

    if isinstance(obj, Mapping):
        if not isinstance(obj, MutableMapping):
            raise TypeError(f"Mapping is not mutable: {type(obj)}")
        if len(path) == 1:
            remember_ref(obj.get(path[0]))
            obj[path[0]] = value
        else:
            if path[0] not in obj:
                obj[path[0]] = [] if type(path[1]) is int else {}
            path_set(obj[path[0]], path[1:], value)
        return obj
    elif isinstance(obj, Sequence):
        if not isinstance(obj, MutableSequence):
            raise TypeError(f"Sequence is not mutable: {type(obj)}")
        try:
            idx = int(path[0])
        except ValueError as e:
            raise KeyError("Sequences need integer indices only.") from e
        while len(obj) <= idx:
            obj.append({} if len(path) > 1 else None)
        if len(path) == 1:
            remember_ref(obj[idx])
            obj[idx] = value
        else:
            path_set(obj[idx], path[1:], value)
        return obj
    else:
        raise TypeError(f"Cannot set anything on type {type(obj)}!")


# endregion

# To run this script, install the tools extra: pip install -e ".[tools]"
Debug = False
if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate models and operations from ARM swagger files.")
    parser.add_argument("files", nargs="+", type=Path, help="Swagger files of the same api version.")
    parser.add_argument("--service", required=True, help="Name of the service package, e.g. labservices")
    parser.add_argument("--client", help="Name of the client class. Derived from the swagger title if not defined.")
    parser.add_argument("--target", type=Path, default=Path("fix_arm_sdk"), help="Root package to write to.")
    parser.add_argument("--debug", action="store_true", default=False)
    args = parser.parse_args()
    Debug = args.debug
    generate(args.files, args.service, args.target, args.client)
