"""Response schemas sent to Gemini with each structured request."""

SECTION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "summary": {"type": "STRING"},
    },
    "required": ["title", "summary"],
}

CHAPTER_PLAN_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "overview": {"type": "STRING"},
        "purpose": {"type": "STRING"},
        "sections": {"type": "ARRAY", "items": SECTION_SCHEMA},
    },
    "required": ["title", "overview", "purpose", "sections"],
}

OUTLINE_SCHEMA = {
    "type": "ARRAY",
    "items": CHAPTER_PLAN_SCHEMA,
}

CHAPTER_CONTENT_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "content": {"type": "STRING"},
        "intent": {"type": "STRING"},
    },
    "required": ["content", "intent"],
}

FINAL_REVIEW_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "chapters": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "title": {"type": "STRING"},
                    "content": {"type": "STRING"},
                },
                "required": ["title", "content"],
            },
        },
    },
    "required": ["chapters"],
}
