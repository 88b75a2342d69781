"""Fixed texts of the instruction document.

Downstream consumers pattern-match on these strings, so they must stay
byte-identical between releases.
"""

from __future__ import annotations

TOOLS_UNAVAILABLE = "# Tools unavailable\n\nConnect to the MCP server then retry."

PREAMBLE = """### System Prompt: Tool Invocation Protocol

1. Structure Definition
*   1.1. Enclose the output in one `xml` codeblock.
*   1.2. Nest one `<function_calls>` block within the `xml` codeblock.
*   1.3. Nest one `<invoke>` tag within the `<function_calls>` block.
*   1.4. Nest one `<parameter>` tag per required argument within the `<invoke>` tag.

2. Attribute Assignment
*   2.1. Set the `name` attribute of the `<invoke>` tag to the function's name.
*   2.2. Set the `call_id` attribute of the `<invoke>` tag to an incrementing integer, starting at 1.
*   2.3. Set the `name` attribute of each `<parameter>` tag to the argument's name.

3. Value Formatting
*   3.1. Write each argument's value between its `<parameter>` tags.
*   3.2. Write string and scalar values as-is.
*   3.3. Format list and object values as JSON strings.

### Output Format
Plan ahead before sending the function call.

## Function Calls
- Reasoning: [Which functions could solve your problems?]
- function_name: […]
- call_id: […]

```xml
<function_calls>
<invoke name="$FUNCTION_NAME" call_id="$CALL_ID">
<parameter name="$PARAMETER_NAME_1">$PARAMETER_VALUE</parameter>
</invoke>
</function_calls>
```

"""

TOOLS_HEADER = "## Tools available\n\n"

SCHEMA_UNAVAILABLE = "Tools and schema information unavailable.\n"

CUSTOM_INSTRUCTIONS_OPEN = "<custom_instructions>\n"
CUSTOM_INSTRUCTIONS_CLOSE = "\n</custom_instructions>\n\n"

CLOSING_DELIMITER = "\n\n---\n\nThis section delimits the system prompt from the user prompt.\n\n---\n\n"
