from __future__ import annotations

from typing import Any, Dict, List

FORMULA_RETURN_TYPES = (
    'String', 'Integer', 'Time', 'DateTime', 'Boolean',
    'Decimal', 'Double', 'Id', 'Date', 'Long',
)

_HELP_CONTENT: Dict[str, Any] = {
    'title': 'Welcome To Formulizer!',
    'description': (
        'Formulizer is a powerful and intuitive app designed for Salesforce users who need to quickly '
        'and accurately evaluate formulas against specific records. With Formulizer, users can input '
        'formula text, select return type, select an object, and instantly receive calculated results '
        'based on the selected record. This tool simplifies the process of testing and validating '
        'formulas by providing real-time feedback, making it an essential utility for Salesforce admins, '
        'developers, and consultants.'
    ),
    'steps': (
        'Select the object, choose the return type, enter the formula, click "Formulize," '
        'and instantly see the formula response!'
    ),
    'examples': [
        {
            'formula_title': '(Sample Formula) Account - Determine Customer Priority Based on Rating',
            'formula': (
                'IF(TEXT(Rating) = "Hot", "Priority Customer", IF(TEXT(Rating) = "Warm", '
                '"Potential for Upsell", IF(TEXT(Rating) = "Cold", "Low Priority", "No Rating Provided")))'
            ),
            'object': 'Account',
            'return_type': 'String',
            'expected_output': (
                'Returns a custom message based on the Rating field of the Account. If the rating is Hot, '
                'the output will be "Priority Customer"; if Warm, it will be "Potential for Upsell"; if Cold, '
                'it will be "Low Priority"; and if no rating is available, it will return "No Rating Provided".'
            ),
        },
        {
            'formula_title': '(Sample Formula) Case - Calculating Response Due Date',
            'formula': (
                'CASE( Priority, "High", CreatedDate + (1/24), "Medium", CreatedDate + (4/24), '
                '"Low", CreatedDate + (8/24), NULL)'
            ),
            'object': 'Case',
            'return_type': 'DateTime',
            'expected_output': (
                'Calculates the Response Due Date based on Priority: adds 1 hour for High, 4 hours for '
                'Medium, 8 hours for Low; returns NULL if Priority is not set.'
            ),
        },
    ],
}


def list_return_types() -> List[str]:
    return list(FORMULA_RETURN_TYPES)


def return_type_options() -> List[Dict[str, str]]:
    return [{'label': name, 'value': name} for name in FORMULA_RETURN_TYPES]


def get_help_content() -> Dict[str, Any]:
    """Static title/description/steps/examples shown in the about modal.

    A fresh copy is returned each call so callers can't mutate the shared content.
    """
    content = dict(_HELP_CONTENT)
    content['examples'] = [dict(example) for example in _HELP_CONTENT['examples']]
    return content


def render_help_markdown(content: Dict[str, Any]) -> str:
    lines: List[str] = [f"## {content['title']}", "", content['description'], "", "### How to use", content['steps']]
    for example in content.get('examples', []):
        lines.extend([
            "",
            f"#### {example['formula_title']}",
            f"- **Object:** {example['object']}",
            f"- **Return Type:** {example['return_type']}",
            "",
            "```",
            example['formula'],
            "```",
            "",
            example['expected_output'],
        ])
    return "\n".join(lines)
