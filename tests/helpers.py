def body_doc(*contents: str, title: str = "Test") -> dict:
    """A page whose body sections have the given HTML contents."""
    return {
        "url": "/en-US/docs/Test",
        "doc": {
            "title": title,
            "body": [
                {"type": "prose", "value": {"id": f"section_{i}", "content": content}}
                for i, content in enumerate(contents)
            ],
        },
    }
