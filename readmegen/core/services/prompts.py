"""
Prompt builder — system and user instructions for README generation.
"""

from __future__ import annotations

from readmegen.core.data import sample_readme

NO_OVERVIEW = "No specific project description provided."
NO_STRUCTURE = "No folder structure provided."

README_SECTIONS = (
    "Title",
    "Overview",
    "Features",
    "Technology Stack",
    "Installation",
    "Usage",
    "API Endpoints (if applicable)",
    "Project Structure (include this section *only* if the folder structure is provided)",
    "Future Enhancements",
    "Contribution Guidelines",
    "License",
    "Author",
)

_SYSTEM_TEMPLATE = """\
You are a GitHub README generator that creates clear, professional, and visually engaging README files using markdown formatting.
Your README should follow best practices in terms of structure, content, and presentation. You will be provided with project details,
including a description, the GitHub repository link and, optionally, the folder structure.

Here is your task:
- Generate a complete README using markdown.
- Use sections in the following order: {sections}.
- Make sure section headers are formatted using markdown syntax (e.g., `##`, `###`).
- Use bullet points, code blocks, and section dividers (`---`) where appropriate for clarity and aesthetics.
- Avoid any commentary, explanation, or meta-text; return *only* the final README content in markdown.

As for author use the username from the repo link, if not available use "Your Name".
As for license use MIT License.
Give the folder structure in the Project Structure section only if it is provided, otherwise skip this section.

Follow these rules strictly:
- Give the installation steps exactly as provided in the sample README below. Do not modify the installation steps.
- Give the usage instructions exactly as provided in the sample README below. Do not modify the usage instructions.
- Don't give lines like "Here's the output:" or "Here is the README:".

Here is a sample README to use as a reference for structure and formatting:

{sample}

Ensure the output closely follows this format. Be concise, complete, and clear."""


def build_system_prompt(sample: str | None = None) -> str:
    """The fixed instruction describing the README shape."""
    return _SYSTEM_TEMPLATE.format(
        sections=", ".join(README_SECTIONS),
        sample=sample if sample is not None else sample_readme(),
    )


def build_user_prompt(overview: str, repo_link: str, folder_structure: str | None) -> str:
    """Project details for one run, with placeholders for missing parts."""
    return (
        f"Project information to include in the README: {overview or NO_OVERVIEW}\n"
        f"GitHub repository link: {repo_link}\n"
        f"Folder structure: {folder_structure or NO_STRUCTURE}"
    )
