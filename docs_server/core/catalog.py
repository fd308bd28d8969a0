"""Built-in documentation sections served by default."""

from docs_server.models.domain.documents import Document

CAPABILITIES_DOCUMENT_ID = "overview"

DEFAULT_DOCUMENTS: tuple[Document, ...] = (
    Document(
        id="overview",
        title="Claude Code Overview",
        body="""Claude Code is an agentic coding tool that lives in your terminal, understands your codebase, and helps you code faster through natural language commands. By integrating directly with your development environment, Claude Code streamlines your workflow without requiring additional servers or complex setup.

Key capabilities:
- Editing files and fixing bugs across your codebase
- Answering questions about your code's architecture and logic
- Executing and fixing tests, linting, and other commands
- Searching through git history, resolving merge conflicts, and creating commits and PRs
- Works with Amazon Bedrock and Google Vertex AI for enterprise deployments

Claude Code uses claude-3-7-sonnet-20250219 by default and operates directly in your terminal with direct API connection to Anthropic's servers.""",
        url="https://docs.anthropic.com/en/docs/claude-code/",
    ),
    Document(
        id="getting-started",
        title="Getting Started with Claude Code",
        body="""To get started with Claude Code:

1. Follow the installation guide which covers:
   - System requirements
   - Installation steps
   - Authentication process

2. Claude Code operates directly in your terminal and maintains awareness of your entire project structure.

3. No need to manually add files to context - Claude will explore your codebase as needed.

Security features:
- Direct API connection to Anthropic's API
- Works directly in your terminal
- Understands your entire project context
- Takes real actions like editing files and creating commits""",
        url="https://docs.anthropic.com/en/docs/claude-code/getting-started",
    ),
    Document(
        id="enterprise",
        title="Enterprise Integration",
        body="""Claude Code seamlessly integrates with enterprise AI platforms:

- Amazon Bedrock integration for secure, compliant deployments
- Google Vertex AI support for enterprise requirements
- Meets organizational security and compliance standards

The enterprise integrations maintain the same direct terminal operation while providing the security and compliance features required by organizations.""",
        url="https://docs.anthropic.com/en/docs/claude-code/bedrock-vertex",
    ),
    Document(
        id="privacy-security",
        title="Privacy and Security",
        body="""Claude Code's architecture ensures security and privacy:

Data Usage:
- Feedback may be used to improve products and services
- Will NOT train generative models using your feedback
- User feedback transcripts stored for only 30 days

Privacy Safeguards:
- Limited retention periods for sensitive information
- Restricted access to user session data
- Clear policies against using feedback for model training
- Direct API connection without intermediate servers

Report bugs with the /bug command or through the GitHub repository.""",
        url="https://docs.anthropic.com/en/docs/claude-code/",
    ),
    Document(
        id="license",
        title="License and Terms",
        body="""Claude Code is provided as a Beta research preview under Anthropic's Commercial Terms of Service.

Current Status:
- Beta research preview gathering developer feedback
- Evolving based on user feedback
- Plans to enhance tool execution reliability, support for long-running commands, terminal rendering, and Claude's self-knowledge

© Anthropic PBC. All rights reserved. Use is subject to Anthropic's Commercial Terms of Service and Privacy Policy.""",
    ),
)

__all__ = ["CAPABILITIES_DOCUMENT_ID", "DEFAULT_DOCUMENTS"]
