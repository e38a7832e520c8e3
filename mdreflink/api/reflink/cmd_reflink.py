"""Reflink API command."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.reflink import ReflinkOutput
from ..config.ReflinkConfig import ReflinkConfig
from ..config.ReflinkConfigError import ReflinkConfigError
from ..markdown.parse_markdown import parse_markdown
from ..markdown.render_markdown import render_markdown
from ..StageResult import StageResult
from .transform import transform


def cmd_reflink(
    text: str,
    column_width: int | None = None,
    path: str | None = None,
    write_in_place: bool = False,
) -> StageResult:
    """Convert the inline links of a Markdown text to shortcut references.

    Args:
        text: Markdown source
        column_width: Enable reflow of long link text with this column budget
        path: File the text came from, if any
        write_in_place: Overwrite ``path`` with the result when it changed
    """
    source_name = path or "standard input"

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Validating configuration...")
        try:
            config = ReflinkConfig.from_config_dict({"column_width": column_width})
        except ReflinkConfigError as exc:
            result_obj.output = ReflinkOutput(
                errors=exc.errors,
                path=path or "",
                markdown=text,
                changed=False,
                written=False,
                links_converted=0,
                conflicts_found=0,
                definitions_added=0,
            ).model_dump(mode="python")
            result_obj.result = "Invalid configuration"
            result_obj.success = False
            return

        yield (0.3, "Parsing Markdown...")
        tree = parse_markdown(text)

        yield (0.5, "Rewriting links...")
        tree, stats = transform(tree, config)

        yield (0.8, "Rendering Markdown...")
        markdown = render_markdown(tree)
        changed = markdown != text

        written = False
        warnings: list[str] = []
        if write_in_place:
            if path is None:
                warnings.append("No file to write; output not written")
            elif changed:
                Path(path).write_text(markdown, encoding="utf-8")
                written = True

        yield (1.0, "Complete")
        result_obj.output = ReflinkOutput(
            warnings=warnings,
            path=path or "",
            markdown=markdown,
            changed=changed,
            written=written,
            links_converted=stats.links_converted,
            conflicts_found=stats.conflicts_found,
            definitions_added=stats.definitions_added,
        ).model_dump(mode="python")
        result_obj.result = (
            f"Converted {stats.links_converted} links in {source_name} "
            f"({stats.conflicts_found} conflicts, {stats.definitions_added} definitions added)"
        )
        result_obj.success = True

    return StageResult(announce=f"Converting links in {source_name}...", progress_callback=do_work)
