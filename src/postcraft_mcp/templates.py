"""Starter posts written in the markdown dialect the formatter understands."""

from __future__ import annotations


class UnknownTemplateError(KeyError):
    """Raised when a template name is not in the gallery."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return (
            f"Unknown template {self.name!r}. "
            f"Available: {', '.join(template_names())}"
        )


TEMPLATES: dict[str, str] = {
    "announcement": """# 🚀 Exciting News!

I'm thrilled to announce that **[Your Achievement]**

**Key highlights:**
- Achievement 1
- Achievement 2
- Achievement 3

*Thank you* to everyone who supported this journey!

#achievement #milestone #grateful""",
    "tip": """💡 **Pro Tip:** [Your main tip]

Here's what I've learned:

1. **Point 1:** Explanation
2. **Point 2:** Explanation
3. **Point 3:** Explanation

*What's your experience with this?* Drop a comment below! 👇

#tips #learning #growth""",
    "story": """📖 **Story time:** [Brief hook]

**The challenge:**
[Describe the problem]

**The solution:**
[What you did]

**The result:**
[Impact and outcome]

**Key takeaway:** _[Main lesson learned]_

What challenges are you facing? Let's discuss! 💬

#storytelling #lessons #experience""",
}


def template_names() -> list[str]:
    return list(TEMPLATES)


def get_template(name: str) -> str:
    """Return the markup for template ``name``.

    Raises:
        UnknownTemplateError: If no template has that name.
    """
    try:
        return TEMPLATES[name]
    except KeyError:
        raise UnknownTemplateError(name) from None
