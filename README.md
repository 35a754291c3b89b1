# modelmeta

Building blocks for collecting and checking metadata about machine-learning
models and MCP servers. It covers:

- Typed records for model indexes and catalogs (`modelmeta.types`) and for MCP
  server indexes and catalogs (`modelmeta.mcpserver`). Each record is built
  from and written back to the plain dictionaries that YAML files load into.
- Tool-calling settings (`modelmeta.toolcalling`), vLLM recommended serving
  presets (`modelmeta.vllmconfig`) and serving-runtime overrides
  (`modelmeta.servingruntime`), each able to check itself.
- Text helpers for model cards (`modelmeta.text`), value cleaning and date
  parsing (`modelmeta.validation`), and licence link lookup
  (`modelmeta.license`).
- A retry helper with exponential backoff and an overall deadline
  (`modelmeta.retry`).
- YAML output that always ends in a newline and never folds long strings
  (`modelmeta.yamlio`).
- A completeness report for a models catalog, written as Markdown and YAML
  (`modelmeta.report`).

The package needs Python 3.10 or later and PyYAML.

## Model types

```python
from modelmeta.types import ModelTypeError, default_model_type, validate_model_type

default_model_type()              # "generative"
validate_model_type("predictive")  # accepted

try:
    validate_model_type("other")
except ModelTypeError as exc:
    print(exc)
```

## Reading catalogs

```python
import yaml
from modelmeta.types import ModelsCatalog
from modelmeta.mcpserver import MCPServersCatalog

with open("models-catalog.yaml", encoding="utf-8") as fh:
    catalog = ModelsCatalog.from_dict(yaml.safe_load(fh))

for model in catalog.models:
    print(model.name, model.license)

servers = MCPServersCatalog.from_dict({"source": "Example", "mcp_servers": []})
```

## Tool calling

```python
from modelmeta.toolcalling import ToolCallingConfig, ToolCallingError

config = ToolCallingConfig.from_dict({
    "tool_calling_supported": True,
    "chat_template_path": "examples/",
    "chat_template_file_name": "tool_chat_template_llama3.1_json.jinja",
    "tool_call_parser": "llama3_json",
})

config.has_tool_calling()          # True
config.processed_template_path()   # "opt/app-root/template/tool_chat_template_llama3.1_json.jinja"
config.validate()                  # raises ToolCallingError for an unknown parser
```

## vLLM presets and runtime overrides

```python
from modelmeta.vllmconfig import VLLMConfigError, VLLMRecommendedConfig
from modelmeta.servingruntime import ServingRuntimeOverrideConfig, ServingRuntimeOverrideError

vllm = VLLMRecommendedConfig.from_dict({
    "model": {"name": "RedHatAI/gpt-oss-120b"},
    "presets": [{
        "mode": "online-serving",
        "optimizations": [{
            "optimization": "low-latency",
            "hardware": "H200",
            "cli-args": ["--tensor-parallel-size 1"],
            "constraints": [{"name": "TTFT", "value": "10ms", "operator": "<="}],
        }],
    }],
})
vllm.has_presets()   # True
vllm.validate()      # raises VLLMConfigError when a required field is missing

override = ServingRuntimeOverrideConfig.from_dict({
    "preview_image": "registry.example.com/image:tag",
    "runtime_name": "test-runtime",
    "display_name": "Test Runtime",
})
override.validate()  # raises ServingRuntimeOverrideError when a field is missing
```

## Text and value helpers

```python
from modelmeta.text import (
    generate_description_from_model_name,
    normalize_task,
    parse_language_names,
    strip_yaml_frontmatter,
)
from modelmeta.validation import clean_extracted_value, parse_date_to_epoch, sanitize_manifest_ref
from modelmeta.license import get_license_url

strip_yaml_frontmatter("---\nlicense: apache-2.0\n---\n## Content")  # "## Content"
parse_language_names("english and spanish")                          # ["en", "es"]
generate_description_from_model_name("RedHatAI/Llama-3.3-70B-Instruct")  # "Llama 3.3 70B Instruct"
normalize_task("sentiment analysis")                                 # "text-classification"

clean_extracted_value("  **bold text**  ")                           # "bold text"
sanitize_manifest_ref("registry.redhat.io/rhelai1/modelcar-granite:1.0")
# "registry.redhat.io_rhelai1_modelcar-granite_1.0"
parse_date_to_epoch("2024-01-15")                                    # epoch milliseconds, or None

get_license_url("APACHE-2.0")    # canonical link for a well-known licence, "" if unknown
```

## Retrying an operation

`retry_with_exponential_backoff` calls an operation until it succeeds or the
retries run out, waiting longer each time up to a cap. When the overall
deadline passes first it raises `RetryTimeoutError`; otherwise the last
error from the operation is raised.

```python
from modelmeta.retry import RetryConfig, retry_with_exponential_backoff

result = retry_with_exponential_backoff(RetryConfig(), fetch_manifest, "fetch manifest")
```

## YAML output

```python
from modelmeta.yamlio import marshal_yaml_with_newline

text = marshal_yaml_with_newline({"name": "hello"})   # ends with "\n"
```

## Completeness report

Given a models catalog and the directory of per-model extraction output
(each model in `<dir>/models/metadata.yaml` with an optional
`enrichment.yaml` beside it), the report counts which catalog fields are
filled in and where each value came from:

```python
from modelmeta.report import generate_metadata_report

generate_metadata_report("models-catalog.yaml", "output", "reports")
# writes reports/metadata-report.md and reports/metadata-report.yaml
```

The steps are also available one by one: `read_catalog`,
`load_enrichment_data`, `build_report`, `render_markdown` and `render_yaml`.
Failures are raised as `ReportError`.