"""Output schemas for link commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema


class FoundIssue(BaseModel):
    markdown_link: str = Field(..., description="The link as written in the document")
    reasons: list[str] = Field(..., description="Reason codes in discovery order")
    line_numbers: list[int] = Field(default_factory=list, description="1-based lines the link appears on")


class BadLinksInFile(BaseModel):
    file_path: str = Field(..., description="Path of the document, relative to the scan root when inside it")
    found_issues: list[FoundIssue] = Field(..., description="Bad links of the document in source order")


class LinkScanOutput(BaseOutputSchema):
    """Output schema for the scan command.

    Output structure:
    - errors: list[str] - fatal problems, e.g. a missing root or unreadable document
    - warnings: list[str] - non-fatal problems
    - root: str - the scanned directory
    - files_scanned: int - number of documents read
    - bad_links: list - one entry per document with findings, sorted by file path
    """

    root: str = Field(..., description="Scanned directory")
    files_scanned: int = Field(..., description="Number of documents scanned")
    bad_links: list[BadLinksInFile] = Field(..., description="Documents with bad links, sorted by path")


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for the check command."""

    path: str = Field(..., description="Checked document")
    root: str = Field(..., description="Directory that absolute links resolve against")
    bad_links: list[BadLinksInFile] = Field(..., description="The document's bad links, empty when none")
