"""Metadata completeness reports for a models catalog."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from modelmeta.types import CatalogMetadata, ExtractedMetadata, ModelsCatalog
from modelmeta.yamlio import marshal_yaml_with_newline

TRACKED_FIELDS = (
    "name",
    "provider",
    "description",
    "readme",
    "language",
    "license",
    "licenseLink",
    "tasks",
    "artifacts",
    "createTimeSinceEpoch",
)

DEFAULT_SOURCE = "modelcard.regex"

# Report field name -> key in an enrichment file's data_sources.
_SOURCE_KEYS = {
    "name": "name",
    "provider": "provider",
    "description": "description",
    "license": "license",
    "tasks": "tasks",
    "createTimeSinceEpoch": "create_time_since_epoch",
    "readme": "readme",
    "language": "language",
    "licenseLink": "license_link",
}

# Report field name -> CatalogMetadata attribute for plain string fields.
_STRING_FIELDS = {
    "name": "name",
    "provider": "provider",
    "description": "description",
    "license": "license",
    "licenseLink": "license_link",
    "createTimeSinceEpoch": "create_time_since_epoch",
}

_BREAKDOWN_ATTRS = {
    "modelcard.yaml": "modelcard_yaml",
    "modelcard.regex": "modelcard_regex",
    "modelcard.inferred": "modelcard_regex",
    "huggingface.yaml": "huggingface_yaml",
    "huggingface.tags": "huggingface_tags",
    "huggingface.regex": "huggingface_regex",
    "huggingface.api": "huggingface_regex",
    "registry": "registry",
    "generated": "generated",
}

_BREAKDOWN_LABELS = (
    ("Modelcard YAML", "modelcard_yaml"),
    ("Modelcard Regex", "modelcard_regex"),
    ("HuggingFace YAML", "huggingface_yaml"),
    ("HuggingFace Tags", "huggingface_tags"),
    ("HuggingFace Regex", "huggingface_regex"),
    ("Registry", "registry"),
    ("Generated", "generated"),
    ("Other", "other"),
)


class ReportError(Exception):
    """Raised when a report cannot be read, built or written."""


@dataclass
class Completeness:
    """How many models have a value for one field."""

    populated: int = 0
    null: int = 0
    percentage: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"populated": self.populated, "null": self.null, "percentage": self.percentage}


@dataclass
class SourceBreakdown:
    """Counts of populated fields by kind of source."""

    modelcard_yaml: int = 0
    modelcard_regex: int = 0
    huggingface_yaml: int = 0
    huggingface_tags: int = 0
    huggingface_regex: int = 0
    registry: int = 0
    generated: int = 0
    other: int = 0

    def record(self, source: str) -> None:
        """Count one field that came from source."""
        attr = _BREAKDOWN_ATTRS.get(source, "other")
        setattr(self, attr, getattr(self, attr) + 1)

    @property
    def yaml_fields(self) -> int:
        return self.modelcard_yaml + self.huggingface_yaml

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))

    def labelled(self) -> list[tuple[str, int]]:
        """Return (label, count) pairs in a fixed order."""
        return [(label, getattr(self, attr)) for label, attr in _BREAKDOWN_LABELS]

    def to_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class FieldStatus:
    """The value of one field and where it came from."""

    value: Any = None
    source: str = "unknown"
    detection_method: str = "Unknown"
    is_null: bool = True
    is_empty: bool = False

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.value is not None:
            result["value"] = self.value
        result["source"] = self.source
        result["detection_method"] = self.detection_method
        result["is_null"] = self.is_null
        if self.is_empty:
            result["is_empty"] = True
        return result


@dataclass
class ModelReport:
    """Completeness analysis of one model."""

    name: str = ""
    provider: str = ""
    fields: dict[str, FieldStatus] = field(default_factory=dict)
    missing_fields: list[str] = field(default_factory=list)
    data_sources: dict[str, int] = field(default_factory=dict)
    source_breakdown: SourceBreakdown = field(default_factory=SourceBreakdown)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.provider:
            result["provider"] = self.provider
        result["fields"] = {k: self.fields[k].to_dict() for k in sorted(self.fields)}
        if self.missing_fields:
            result["missing_fields"] = list(self.missing_fields)
        result["data_sources"] = dict(sorted(self.data_sources.items()))
        if self.source_breakdown.total:
            result["source_breakdown"] = self.source_breakdown.to_dict()
        return result


@dataclass
class ReportSummary:
    """Statistics over all models."""

    total_models: int = 0
    field_completeness: dict[str, Completeness] = field(default_factory=dict)
    data_sources: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_models": self.total_models,
            "field_completeness": {
                k: self.field_completeness[k].to_dict() for k in sorted(self.field_completeness)
            },
            "data_sources": dict(sorted(self.data_sources.items())),
        }


@dataclass
class MetadataReport:
    """A full metadata completeness report."""

    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    summary: ReportSummary = field(default_factory=ReportSummary)
    models: list[ModelReport] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "generated_at": self.generated_at.isoformat(),
            "summary": self.summary.to_dict(),
            "models": [m.to_dict() for m in self.models],
        }


@dataclass
class EnrichmentData:
    """The parts of an enrichment.yaml file the report uses."""

    huggingface_model: str = ""
    huggingface_url: str = ""
    match_confidence: str = ""
    data_sources: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> EnrichmentData:
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise TypeError(f"enrichment data: expected a mapping, got {type(data).__name__}")
        sources = data.get("data_sources") or {}
        if not isinstance(sources, Mapping):
            raise TypeError("data_sources: expected a mapping")

        def text(value: Any) -> str:
            return "" if value is None else str(value)

        return cls(
            huggingface_model=text(data.get("huggingface_model")),
            huggingface_url=text(data.get("huggingface_url")),
            match_confidence=text(data.get("match_confidence")),
            data_sources={str(k): text(v) for k, v in sources.items()},
        )


def read_catalog(catalog_path: str | Path) -> ModelsCatalog:
    """Read and parse a models catalog file."""
    text = Path(catalog_path).read_text(encoding="utf-8")
    return ModelsCatalog.from_dict(yaml.safe_load(text))


def _read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def load_enrichment_data(
    output_dir: str | Path, models: Iterable[CatalogMetadata]
) -> dict[str, EnrichmentData]:
    """Find the enrichment file of each catalog model under output_dir.

    Each subdirectory's models/metadata.yaml gives the model name that its
    models/enrichment.yaml belongs to; unreadable files are skipped.
    """
    by_name: dict[str, EnrichmentData] = {}
    for directory in sorted(Path(output_dir).glob("*")):
        enrichment_file = directory / "models" / "enrichment.yaml"
        metadata_file = directory / "models" / "metadata.yaml"
        if not enrichment_file.exists():
            continue
        try:
            enriched = EnrichmentData.from_dict(_read_yaml(enrichment_file))
        except (OSError, yaml.YAMLError, TypeError):
            continue
        try:
            metadata = ExtractedMetadata.from_dict(_read_yaml(metadata_file))
        except (OSError, yaml.YAMLError, TypeError):
            continue
        if metadata.name is not None:
            by_name[metadata.name] = enriched

    result: dict[str, EnrichmentData] = {}
    for model in models:
        name = model.name or ""
        if name in by_name:
            result[name] = by_name[name]
    return result


def detection_method(source: str) -> str:
    """Describe how a value with the given source was found."""
    if source.endswith(".yaml"):
        return "YAML frontmatter"
    if source.endswith(".regex"):
        return "Regex extraction"
    if source.endswith(".api"):
        return "API call"
    if source.endswith(".tags"):
        return "Tags metadata"
    if source == "generated":
        return "Generated"
    if source == "registry":
        return "Registry artifacts"
    return "Unknown"


def _source_for(enriched: EnrichmentData | None, field_name: str) -> str:
    if enriched is None or not enriched.data_sources:
        return DEFAULT_SOURCE
    key = _SOURCE_KEYS.get(field_name)
    if key is None:
        return DEFAULT_SOURCE
    return enriched.data_sources.get(key) or DEFAULT_SOURCE


def _analyze_field(
    field_name: str, model: CatalogMetadata, enriched: EnrichmentData | None
) -> FieldStatus:
    status = FieldStatus()
    value: Any = None

    if field_name in _STRING_FIELDS:
        text = getattr(model, _STRING_FIELDS[field_name])
        if text:
            value = text
    elif field_name == "readme":
        if model.readme:
            value = "present"
    elif field_name == "language":
        if model.language:
            value = list(model.language)
    elif field_name == "tasks":
        if model.tasks:
            value = list(model.tasks)
    elif field_name == "artifacts":
        if model.artifacts:
            return FieldStatus(
                value=len(model.artifacts),
                source="registry",
                detection_method="Registry artifacts",
                is_null=False,
            )

    if value is None:
        return status

    source = _source_for(enriched, field_name)
    status = FieldStatus(
        value=value, source=source, detection_method=detection_method(source), is_null=False
    )
    if isinstance(value, (str, list)):
        status.is_empty = len(value) == 0
    return status


def analyze_model(
    model: CatalogMetadata,
    enriched: EnrichmentData | None,
    tracked_fields: Sequence[str] = TRACKED_FIELDS,
) -> ModelReport:
    """Analyse which tracked fields of a model are populated and from where."""
    report = ModelReport(name=model.name or "", provider=model.provider or "")
    for field_name in tracked_fields:
        status = _analyze_field(field_name, model, enriched)
        report.fields[field_name] = status
        if status.is_null:
            report.missing_fields.append(field_name)
        else:
            report.data_sources[status.source] = report.data_sources.get(status.source, 0) + 1
            report.source_breakdown.record(status.source)
    return report


def build_report(
    catalog: ModelsCatalog, enrichment_data: Mapping[str, EnrichmentData]
) -> MetadataReport:
    """Build a completeness report for every model in the catalog."""
    summary = ReportSummary(
        total_models=len(catalog.models),
        field_completeness={f: Completeness() for f in TRACKED_FIELDS},
    )
    report = MetadataReport(summary=summary)

    for model in catalog.models:
        model_report = analyze_model(
            model, enrichment_data.get(model.name or ""), TRACKED_FIELDS
        )
        report.models.append(model_report)
        for field_name in TRACKED_FIELDS:
            status = model_report.fields[field_name]
            completeness = summary.field_completeness[field_name]
            if status.is_null:
                completeness.null += 1
            else:
                completeness.populated += 1
                summary.data_sources[status.source] = (
                    summary.data_sources.get(status.source, 0) + 1
                )

    for completeness in summary.field_completeness.values():
        total = completeness.populated + completeness.null
        if total:
            completeness.percentage = completeness.populated / total * 100
    return report


def format_value(value: Any) -> str:
    """Format a field value for a markdown table cell."""
    if value is None:
        return "—"
    if isinstance(value, str):
        return value[:50] + "..." if len(value) > 50 else value
    if isinstance(value, list):
        if not value:
            return "—"
        if len(value) == 1:
            return str(value[0])
        return f"{value[0]} (+{len(value) - 1} more)"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_markdown(report: MetadataReport) -> str:
    """Render the report as markdown text."""
    lines = [
        "# Model Metadata Completeness Report",
        "",
        f"**Generated:** {report.generated_at.strftime('%Y-%m-%d %H:%M:%S')} UTC",
        "",
        "## Summary",
        "",
        f"**Total Models:** {report.summary.total_models}",
        "",
        "### Field Completeness",
        "",
        "| Field | Populated | Null | Percentage |",
        "|-------|-----------|------|------------|",
    ]
    by_completeness = sorted(
        report.summary.field_completeness.items(), key=lambda item: -item[1].percentage
    )
    for name, comp in by_completeness:
        lines.append(f"| {name} | {comp.populated} | {comp.null} | {comp.percentage:.1f}% |")

    lines += [
        "",
        "### Data Sources",
        "",
        "| Source | Count | Percentage |",
        "|--------|-------|------------|",
    ]
    total = sum(report.summary.data_sources.values())
    for source, count in sorted(report.summary.data_sources.items(), key=lambda i: -i[1]):
        lines.append(f"| {source} | {count} | {count / total * 100:.1f}% |")

    lines += [
        "",
        "### Detailed Source Breakdown",
        "",
        "| Source Type | Count | Percentage |",
        "|-------------|-------|------------|",
    ]
    breakdown: Counter[str] = Counter()
    for model in report.models:
        for label, count in model.source_breakdown.labelled():
            breakdown[label] += count
    entries = [(label, count) for label, count in breakdown.items() if count > 0]
    for label, count in sorted(entries, key=lambda i: -i[1]):
        lines.append(f"| {label} | {count} | {count / total * 100:.1f}% |")

    lines += ["", "## Individual Model Reports", ""]
    for model in report.models:
        lines += [f"### {model.name}", ""]
        if model.provider:
            lines += [f"**Provider:** {model.provider}", ""]
        if model.missing_fields:
            lines += [f"**Missing Fields:** {', '.join(model.missing_fields)}", ""]

        yaml_fields = model.source_breakdown.yaml_fields
        total_fields = model.source_breakdown.total
        if total_fields:
            share = yaml_fields / total_fields * 100
            lines += [
                f"**YAML Frontmatter Health:** {share:.1f}% "
                f"({yaml_fields}/{total_fields} fields from YAML)",
                "",
            ]

        lines += [
            "| Field | Value | Source | Detection Method | Status |",
            "|-------|-------|--------|------------------|--------|",
        ]
        for name in sorted(model.fields):
            status = model.fields[name]
            value = format_value(status.value)
            mark = "✅"
            if status.is_null:
                mark, value = "❌ null", "—"
            elif status.is_empty:
                mark = "⚠️ empty"
            lines.append(
                f"| {name} | {value} | {status.source} | {status.detection_method} | {mark} |"
            )
        lines.append("")

    return "\n".join(lines) + "\n"


def render_yaml(report: MetadataReport) -> str:
    """Render the report as YAML text."""
    return marshal_yaml_with_newline(report.to_dict())


def generate_metadata_report(
    catalog_path: str | Path, output_dir: str | Path, report_dir: str | Path
) -> MetadataReport:
    """Build the report for a catalog and write it as markdown and YAML into report_dir."""
    try:
        catalog = read_catalog(catalog_path)
    except (OSError, yaml.YAMLError, TypeError) as exc:
        raise ReportError(f"failed to read catalog: {exc}") from exc

    try:
        enrichment = load_enrichment_data(output_dir, catalog.models)
    except OSError as exc:
        raise ReportError(f"failed to load enrichment data: {exc}") from exc

    report = build_report(catalog, enrichment)

    markdown_path = Path(report_dir) / "metadata-report.md"
    try:
        markdown_path.write_text(render_markdown(report), encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"failed to write markdown report: {exc}") from exc

    yaml_path = Path(report_dir) / "metadata-report.yaml"
    try:
        yaml_path.write_text(render_yaml(report), encoding="utf-8")
    except (OSError, yaml.YAMLError) as exc:
        raise ReportError(f"failed to write YAML report: {exc}") from exc

    print("Metadata reports generated:")
    print(f"  Markdown: {markdown_path}")
    print(f"  YAML: {yaml_path}")
    return report