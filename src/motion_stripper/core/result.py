"""
Data structures representing the output of the rewrite pipeline.

`StripResult` describes what happened to a piece of text; `FileReport`
describes what happened to a file on disk.
"""

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field


class StripResult(BaseModel):
  """
  Container for the results of running the pipeline over one text.
  """

  code: str = Field(default="", description="The rewritten source text.")
  changed: bool = Field(default=False, description="True if the output differs from the input.")
  passes_applied: List[str] = Field(
    default_factory=list,
    description="Names of the passes that altered the text, in execution order.",
  )


class FileReport(BaseModel):
  """
  Outcome of processing a single file.
  """

  path: Path = Field(description="The processed file.")
  changed: bool = Field(default=False, description="True if the rewrite altered the text.")
  written: bool = Field(default=False, description="True if the file was overwritten.")
  passes_applied: List[str] = Field(default_factory=list, description="Passes that altered the text.")

  @property
  def name(self) -> str:
    """
    Base name of the processed file.

    Returns:
        The file name without directories.
    """
    return self.path.name
