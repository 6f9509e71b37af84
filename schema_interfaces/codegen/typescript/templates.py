"""Jinja2 templates for TypeScript declarations."""

ENUM_STRING_UNION_TEMPLATE = (
    '{{ export }}type {{ name }} = {{ values | map("quote") | join(" | ") }};'
)

ENUM_NATIVE_TEMPLATE = """\
{{ export }}enum {{ name }} {
{% for value in values %}  {{ value }} = {{ value | quote }}{{ ",\\n" if not loop.last else "" }}{% endfor %}
}"""

ENUM_OBJECT_TEMPLATE = """\
{{ export }}type {{ name }} = {{ values | map("quote") | join(" | ") }};

{{ export }}const {{ object_name }} = {
{% for value in values %}  {{ value }}: {{ value | quote }}{{ ",\\n" if not loop.last else "" }}{% endfor %}
} satisfies Record<string, {{ name }}>;"""

FIELD_TEMPLATE = '  {{ name }}{{ "?" if optional else "" }}: {{ type }};'

INTERFACE_TEMPLATE = """\
export interface {{ name }} {
{{ fields | join("\\n") }}
}"""

TYPE_ALIAS_TEMPLATE = """\
export type {{ name }} = {
{{ fields | join("\\n") }}
};"""

DOCUMENT_TEMPLATE = """\
{% if header %}{{ header | comment }}

{% endif %}{{ blocks | join("\\n\\n") }}
"""

TYPESCRIPT_TEMPLATES = {
    "enum_string_union.ts": ENUM_STRING_UNION_TEMPLATE,
    "enum_native.ts": ENUM_NATIVE_TEMPLATE,
    "enum_object.ts": ENUM_OBJECT_TEMPLATE,
    "field.ts": FIELD_TEMPLATE,
    "interface.ts": INTERFACE_TEMPLATE,
    "type_alias.ts": TYPE_ALIAS_TEMPLATE,
    "document.ts": DOCUMENT_TEMPLATE,
}
