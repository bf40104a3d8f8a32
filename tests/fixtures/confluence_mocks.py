"""Canned Confluence API payloads for both API generations."""

# Legacy /rest/api shapes

MOCK_SPACES_RESPONSE = {
    "results": [
        {
            "id": 123456789,
            "key": "TEST",
            "name": "Test Space",
            "type": "global",
            "status": "current",
            "_links": {"webui": "/spaces/TEST", "self": "https://example.atlassian.net/wiki/rest/api/space/TEST"},
        },
        {
            "id": 987654321,
            "key": "~jdoe",
            "name": "John Doe",
            "type": "personal",
            "status": "current",
            "_links": {"webui": "/spaces/~jdoe"},
        },
    ],
    "start": 0,
    "limit": 25,
    "size": 2,
    "_links": {
        "base": "https://example.atlassian.net/wiki",
        "context": "/wiki",
        "self": "https://example.atlassian.net/wiki/rest/api/space",
    },
}

MOCK_PAGE_RESPONSE = {
    "id": "987654321",
    "type": "page",
    "status": "current",
    "title": "Example Meeting Notes",
    "space": {"id": 123456789, "key": "TEST", "name": "Test Space"},
    "history": {
        "latest": True,
        "createdBy": {
            "type": "known",
            "accountId": "5b10ac8d82e05b22cc7d4ef5",
            "displayName": "Example User",
        },
        "createdDate": "2024-01-01T09:00:00.000Z",
    },
    "version": {
        "number": 1,
        "when": "2024-01-01T09:00:00.000Z",
        "message": "",
    },
    "body": {
        "storage": {
            "value": "<p>The team discussed <strong>the roadmap</strong>.</p>",
            "representation": "storage",
        }
    },
    "ancestors": [{"id": "111"}, {"id": "222"}],
    "_links": {
        "webui": "/spaces/TEST/pages/987654321/Example+Meeting+Notes",
        "self": "https://example.atlassian.net/wiki/rest/api/content/987654321",
    },
}

MOCK_PAGES_FROM_SPACE_RESPONSE = {
    "results": [
        MOCK_PAGE_RESPONSE,
        {
            "id": "123450000",
            "type": "page",
            "status": "current",
            "title": "Sprint Planning",
            "space": {"id": 123456789, "key": "TEST"},
            "version": {"number": 4, "when": "2024-02-01T09:00:00.000Z"},
            "body": {"storage": {"value": "<p>Plan</p>", "representation": "storage"}},
            "_links": {"webui": "/spaces/TEST/pages/123450000/Sprint+Planning"},
        },
    ],
    "start": 0,
    "limit": 25,
    "size": 2,
    "_links": {
        "self": "https://example.atlassian.net/wiki/rest/api/content/search",
        "next": "/rest/api/content/search?cql=space%3D%22TEST%22&start=2",
        "prev": "/rest/api/content/search?start=0",
    },
}

MOCK_CQL_SEARCH_RESPONSE = {
    "results": [
        {
            "id": "123456789",
            "type": "page",
            "status": "current",
            "title": "2024-01-01: Team Progress Meeting",
            "space": {"id": 123456789, "key": "TEST"},
            "version": {"number": 3, "when": "2024-08-01T10:00:00.000Z"},
            "_links": {"webui": "/spaces/TEST/pages/123456789/Team+Progress"},
        },
        {
            "id": "555555555",
            "type": "page",
            "status": "current",
            "title": "Budget Report",
            "space": {"id": 123456789, "key": "TEST"},
            "version": {"number": 1, "when": "2024-07-01T10:00:00.000Z"},
            "excerpt": "The <b>budget</b> for Q3",
            "_links": {"webui": "/spaces/TEST/pages/555555555/Budget+Report"},
        },
    ],
    "start": 0,
    "limit": 25,
    "size": 2,
    "totalSize": 2,
    "_links": {
        "base": "https://example.atlassian.net/wiki",
        "next": "/rest/api/content/search?cql=text~%22budget%22&start=2",
        "prev": "/rest/api/content/search?start=0",
    },
}

MOCK_LABELS_RESPONSE = {
    "results": [
        {"prefix": "global", "name": "meeting-notes", "id": "456789123", "label": "meeting-notes"},
        {"prefix": "my", "name": "important", "id": "456789124", "label": "important"},
        {"prefix": "global", "name": "test", "id": "456789125", "label": "test"},
    ],
    "start": 0,
    "limit": 200,
    "size": 3,
    "_links": {"self": "https://example.atlassian.net/wiki/rest/api/content/987654321/label"},
}

# Typed /api/v2 shapes

MOCK_V2_SPACES_RESPONSE = {
    "results": [
        {
            "id": "65537",
            "key": "TEST",
            "name": "Test Space",
            "type": "global",
            "status": "current",
            "_links": {"webui": "/spaces/TEST"},
        }
    ],
    "_links": {"next": "/wiki/api/v2/spaces?cursor=abc", "base": "https://example.atlassian.net/wiki"},
}

MOCK_V2_PAGE_RESPONSE = {
    "id": "98765",
    "status": "current",
    "title": "Typed Page",
    "spaceId": "65537",
    "parentId": "11111",
    "authorId": "557058:abcd",
    "ownerId": "557058:owner",
    "createdAt": "2024-03-01T12:00:00.000Z",
    "version": {
        "number": 2,
        "message": "Second",
        "createdAt": "2024-03-02T12:00:00.000Z",
        "authorId": "557058:abcd",
    },
    "body": {"storage": {"representation": "storage", "value": "<p>Typed body</p>"}},
    "_links": {"webui": "/spaces/TEST/pages/98765/Typed+Page"},
}

MOCK_V2_PAGES_RESPONSE = {
    "results": [
        MOCK_V2_PAGE_RESPONSE,
        {
            "id": "98766",
            "status": "current",
            "title": "Another Typed Page",
            "spaceId": "65537",
            "authorId": "557058:efgh",
            "createdAt": "2024-03-03T12:00:00.000Z",
            "version": {"number": 1, "createdAt": "2024-03-03T12:00:00.000Z"},
            "_links": {"webui": "/spaces/TEST/pages/98766"},
        },
    ],
    "_links": {"next": "/wiki/api/v2/pages?cursor=xyz"},
}

MOCK_V2_BODY_RESPONSE = {"representation": "storage", "value": "<p>Typed body</p>"}

MOCK_V2_LABELS_RESPONSE = {
    "results": [
        {"id": "1001", "name": "release", "prefix": "global"},
        {"id": "1002", "name": "draft", "prefix": "global"},
    ],
    "_links": {},
}

MOCK_GENERIC_SEARCH_RESPONSE = {
    "results": [
        {
            "content": {
                "id": "98765",
                "type": "page",
                "status": "current",
                "title": "Typed Page",
                "space": {"id": 65537, "key": "TEST"},
                "_links": {"webui": "/spaces/TEST/pages/98765/Typed+Page"},
            },
            "title": "Typed Page",
            "excerpt": "A @@@hl@@@typed@@@endhl@@@ page",
            "url": "/spaces/TEST/pages/98765/Typed+Page",
            "lastModified": "2024-03-02T12:00:00.000Z",
        },
        {
            "content": {
                "id": "98766",
                "type": "page",
                "status": "current",
                "title": "No Excerpt",
                "_links": {"webui": "/spaces/TEST/pages/98766"},
            },
            "url": "/spaces/TEST/pages/98766",
            "lastModified": "2024-03-03T12:00:00.000Z",
        },
    ],
    "start": 0,
    "limit": 25,
    "size": 2,
    "totalSize": 2,
    "_links": {"base": "https://example.atlassian.net/wiki"},
}
