MISC_FINGERPRINTS = [
    {
        "service": "SurveySparrow",
        "description": "SurveySparrow survey platform",
        "cnames": ["*.surveysparrow.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Account not found.", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "documentation": "https://help.surveysparrow.com/custom-domain",
        "poc": "Create a SurveySparrow account and configure the hostname as custom domain",
    },
    {
        "service": "SmartJobBoard",
        "description": "SmartJobBoard job board platform",
        "cnames": ["*.smartjobboard.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "This job board website is either expired or its domain name is invalid", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "documentation": "https://help.smartjobboard.com/en/articles/1269655",
        "poc": "Create a SmartJobBoard site and configure the hostname as custom domain",
    },
    {
        "service": "HatenaBlog",
        "description": "Hatena Blog platform",
        "cnames": ["*.hatenablog.com", "*.hatenablog.jp", "*.hateblo.jp"],
        "fingerprints": [
            {"type": "http_body", "pattern": "404 Blog is not found", "weight": 10, "required": True},
            {"type": "http_body", "pattern": "ブログが見つかりません", "weight": 10},
        ],
        "takeover_possible": True,
        "poc": "Create a Hatena Blog and configure the hostname as custom domain",
    },
    {
        "service": "Airee",
        "description": "Airee.ru CDN",
        "cnames": ["*.airee.ru"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Ошибка 402", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Register the hostname with Airee",
    },
    {
        "service": "Short.io",
        "description": "Short.io branded links",
        "cnames": ["cname.short.io", "*.short.io"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Link does not exist", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Add the hostname as a branded domain in Short.io",
    },
    {
        "service": "Frontify",
        "description": "Frontify brand portals",
        "cnames": ["*.frontify.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "404 - Page Not Found", "weight": 8},
            {"type": "http_body", "pattern": "Oops… looks like you got lost", "weight": 8},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "min_confidence": 5,
        "takeover_possible": True,
        "poc": "Create a Frontify portal and add the hostname as custom domain",
    },
]
