"""Pydantic models for inline SVG processing."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class InlineSvgOptions(BaseModel):
    """Options passed to the pipeline hook when it is constructed."""

    output_path: str = Field(
        "", alias="path", description="Build output directory; required for processing."
    )
    svgo_config: Dict[str, Any] = Field(
        default_factory=dict,
        alias="svgoConfig",
        description="Optimizer options overlaid on the defaults.",
    )

    model_config = ConfigDict(populate_by_name=True)


class HtmlDocument(BaseModel):
    """A generated HTML document before it is finalized for output."""

    output_name: str = Field(
        "", alias="outputName", description="Output filename of the document."
    )
    html: str = Field(..., description="Markup as currently generated.")

    model_config = ConfigDict(populate_by_name=True)


class InlineSvgConfig(BaseModel):
    """Schema for svginline.yaml."""

    output_path: Optional[str] = Field(
        None, alias="outputPath", description="Build output directory to rewrite."
    )
    include: str = Field(
        "**/*.html", description="Glob, relative to the output directory, of documents to process."
    )
    assets: str = Field(
        "**/*.svg", description="Glob, relative to the output directory, of assets to load."
    )
    svgo_config: Dict[str, Any] = Field(
        default_factory=dict,
        alias="svgoConfig",
        description="Optimizer options overlaid on the defaults.",
    )

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["HtmlDocument", "InlineSvgConfig", "InlineSvgOptions"]
