# ===----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===----------------------------------------------------------------------===#

"""Command line interface for gltf_views.

Prints the texture graph of a document the way the view layer resolves it:
default samplers, image sources and per-slot texture coordinates.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .document import Document
from .errors import CorruptDocumentError
from .features import FEATURES
from .loader import load_gltf
from .logging import configure_logging, get_logger, section, step
from .material import Material
from .reporting import (
    PlainReporter,
    RichReporter,
    SilentReporter,
    get_reporter,
    set_reporter,
    set_verbosity,
    task,
)
from .texture import Info, Sampler, Texture
from .validator import run_validation_pipeline, summarize

_log = get_logger("cli")


def _enum_name(value: Any) -> Optional[str]:
    return value.name if value is not None else None


def sampler_row(sampler: Sampler) -> Dict[str, Any]:
    return {
        "index": sampler.index(),
        "mag_filter": _enum_name(sampler.mag_filter()),
        "min_filter": _enum_name(sampler.min_filter()),
        "wrap_s": sampler.wrap_s().name,
        "wrap_t": sampler.wrap_t().name,
    }


def texture_row(texture: Texture) -> Dict[str, Any]:
    image = texture.source()
    source = image.source()
    row: Dict[str, Any] = {
        "index": texture.index(),
        "sampler": sampler_row(texture.sampler()),
        "source": {
            "index": image.index(),
            "uri": None if source.is_data_uri else source.uri,
            "embedded": source.is_data_uri,
            "buffer_view": source.buffer_view,
            "mime_type": source.mime_type,
        },
        "extensions": texture.extensions().names(),
    }
    if FEATURES.names:
        row["name"] = texture.name()
    return row


def _info_row(slot: str, info: Optional[Info]) -> Optional[Dict[str, Any]]:
    if info is None:
        return None
    row: Dict[str, Any] = {
        "slot": slot,
        "texture": info.index(),
        "tex_coord": info.tex_coord(),
    }
    transform = info.extensions().texture_transform()
    if transform is not None:
        row["texture_transform"] = {
            "offset": list(transform.offset),
            "rotation": transform.rotation,
            "scale": list(transform.scale),
            "tex_coord": transform.tex_coord,
        }
    return row


def material_row(material: Material) -> Dict[str, Any]:
    pbr = material.pbr_metallic_roughness()
    slots = [
        _info_row("base_color", pbr.base_color_texture()),
        _info_row("metallic_roughness", pbr.metallic_roughness_texture()),
        _info_row("normal", material.normal_texture()),
        _info_row("occlusion", material.occlusion_texture()),
        _info_row("emissive", material.emissive_texture()),
    ]
    row: Dict[str, Any] = {
        "index": material.index(),
        "alpha_mode": material.alpha_mode().value,
        "double_sided": material.double_sided(),
        "textures": [s for s in slots if s is not None],
    }
    if FEATURES.names:
        row["name"] = material.name()
    return row


def _emit(rows: List[Dict[str, Any]], fmt: str) -> None:
    if fmt == "json":
        print(json.dumps(rows, indent=2, sort_keys=True))
    elif fmt == "yaml":
        print(yaml.safe_dump(rows, sort_keys=False), end="")
    else:
        for row in rows:
            print(_text_line(row))


def _text_line(row: Dict[str, Any]) -> str:
    if "sampler" in row:
        s = row["sampler"]
        sampler = "default" if s["index"] is None else f"#{s['index']}"
        src = row["source"]
        if src["embedded"]:
            where = "embedded data uri"
        elif src["uri"] is not None:
            where = src["uri"]
        else:
            where = f"bufferView#{src['buffer_view']}"
        return (
            f"texture #{row['index']}: sampler={sampler} "
            f"wrap={s['wrap_s']}/{s['wrap_t']} "
            f"filter={s['mag_filter']}/{s['min_filter']} "
            f"image=#{src['index']} ({where})"
        )
    slots = ", ".join(
        f"{t['slot']}=#{t['texture']}@TEXCOORD_{t['tex_coord']}"
        for t in row["textures"]
    )
    return (
        f"material #{row['index']}: alpha={row['alpha_mode']} "
        f"textures=[{slots}]"
    )


def _open(path: Path) -> Document:
    with task("load", f"Load {path.name}"):
        return Document(load_gltf(path))


def _validate_cmd(args: argparse.Namespace) -> int:
    step(f"validating {args.file}")
    gltf = load_gltf(args.file)
    rep = get_reporter()
    with section("Validation"):
        errors = run_validation_pipeline(gltf)
        for e in errors:
            rep.error(f"{e.code} {e.path}: {e.message}")
    if errors:
        counts = " ".join(f"{k}={v}" for k, v in sorted(summarize(errors).items()))
        rep.status(f"Validation failed: errors={len(errors)} {counts}")
        return 1
    rep.status("Validation ok")
    return 0


def _textures_cmd(args: argparse.Namespace) -> int:
    doc = _open(args.file)
    with doc:
        total = doc.count("textures")
        rows = []
        with task("textures", "Resolve textures", total=total) as rep:
            for texture in doc.textures():
                rows.append(texture_row(texture))
                fallback = "sampler" if texture.sampler().is_default() else None
                rep.advance("textures", fallback=fallback)
        get_reporter().flush()
        _emit(rows, args.format)
    return 0


def _materials_cmd(args: argparse.Namespace) -> int:
    doc = _open(args.file)
    with doc:
        total = doc.count("materials")
        rows = []
        with task("materials", "Resolve materials", total=total) as rep:
            for material in doc.materials():
                rows.append(material_row(material))
                rep.advance("materials")
        get_reporter().flush()
        _emit(rows, args.format)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gltf-views", description="Inspect glTF texture references"
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeatable)",
    )
    p.add_argument(
        "-r",
        "--reporter",
        choices=["plain", "rich", "silent"],
        default="plain",
        help="Select reporter backend: plain (default), rich, silent",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    v = sub.add_parser("validate", help="Validate a glTF/GLB file")
    v.add_argument("file", type=Path)
    v.set_defaults(func=_validate_cmd)

    for name, func, help_text in (
        ("textures", _textures_cmd, "List textures with resolved samplers"),
        ("materials", _materials_cmd, "List material texture slots"),
    ):
        c = sub.add_parser(name, help=help_text)
        c.add_argument("file", type=Path)
        c.add_argument(
            "--format",
            choices=["text", "json", "yaml"],
            default="text",
            help="Output format (default: text)",
        )
        c.set_defaults(func=func)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.reporter == "silent":
        set_reporter(SilentReporter())
    elif args.reporter == "rich" and sys.stderr.isatty():
        set_reporter(RichReporter())
    else:
        set_reporter(PlainReporter())
    set_verbosity(args.verbose)
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except CorruptDocumentError as exc:
        rep = get_reporter()
        for err in (exc.context or {}).get("errors", []):
            rep.error(f"{err['code']} {err['path']}: {err['message']}")
        _log.error("%s", exc.message)
        return 1
    except FileNotFoundError as exc:
        _log.error("file not found: %s", exc)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
