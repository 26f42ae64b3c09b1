"""
Prompt assembly for RLS policy suggestions.
"""

from typing import Dict, List

from schemas.schema_suggest import SuggestRequest

MODEL = "gpt-3.5-turbo-1106"
MAX_TOKENS = 1024
TEMPERATURE = 0

# Trailing spaces are part of the prompt text
SYSTEM_PROMPT = "\n".join([
    "You're an Postgres expert in writing row level security policies. Your purpose is to ",
    "generate a policy with the constraints given by the user. You will be provided a schema ",
    "on which the policy should be applied.",
    "",
    "The output should use the following instructions:",
    "- The generated SQL must be valid SQL.",
    "- Always use double apostrophe in SQL strings (eg. 'Night''s watch')",
    "- You can use only CREATE POLICY queries, no other queries are allowed.",
    "- You can add short explanations to your messages.",
    "- The result should be a valid markdown. The SQL code should be wrapped in ```.",
    "- Always use \"auth.uid()\" instead of \"current_user\".",
    "- Only use \"WITH CHECK\" on INSERT or UPDATE policies.",
    "- The policy name should be short text explaining the policy, enclosed in double quotes.",
    "- Always make sure that every ``` has a corresponding ending tag ```.",
    "- Always put explanations as separate text. Don't use inline SQL comments. ",
    "",
    "The output should look like this: ",
    "\"CREATE POLICY user_policy ON users FOR INSERT USING (user_name = current_user) WITH (true);\"",
])

SCHEMA_INTRO = "Here is my database schema for reference:"


def schema_message(entity_definitions: List[str]) -> Dict[str, str]:
    """Wrap entity definitions in a fenced code block as a user message."""
    definitions = "\n\n".join(entity_definitions)
    return {
        "role": "user",
        "content": f"{SCHEMA_INTRO}\n```\n{definitions}\n```",
    }


def build_messages(data: SuggestRequest) -> List[Dict[str, str]]:
    """
    Assemble the ordered message list sent to the completion API.

    Args:
        data: Validated request body

    Returns:
        System prompt, then the schema message when definitions were given,
        then the caller's messages in their original order
    """
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]

    if data.entityDefinitions:
        messages.append(schema_message(data.entityDefinitions))

    if data.messages:
        messages.extend({"role": msg.role, "content": msg.content} for msg in data.messages)

    return messages


def completion_options() -> Dict[str, object]:
    return {"model": MODEL, "max_tokens": MAX_TOKENS, "temperature": TEMPERATURE}
