WEBSITE_BUILDER_FINGERPRINTS = [
    {
        "service": "Ghost",
        "description": "Ghost(Pro) publishing",
        "cnames": ["*.ghost.io"],
        "fingerprints": [
            {"type": "dns_nxdomain"},
            {"type": "http_body", "pattern": "The thing you were looking for is no longer here", "weight": 10},
            {"type": "http_body", "pattern": "Failed to resolve DNS path for this host", "weight": 10},
        ],
        "takeover_possible": True,
        "poc": "Create a Ghost(Pro) site and add the hostname as custom domain",
    },
    {
        "service": "WordPress.com",
        "description": "WordPress.com hosted blogs",
        "cnames": ["*.wordpress.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Do you want to register", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Register the blog name on WordPress.com and map the domain",
    },
    {
        "service": "Webflow",
        "description": "Webflow site hosting",
        "cnames": ["proxy.webflow.com", "proxy-ssl.webflow.com", "*.webflow.io"],
        "fingerprints": [
            {"type": "http_body", "pattern": "The page you are looking for doesn't exist or has been moved", "weight": 8},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": False,
        "documentation": "Requires site ownership verification",
    },
    {
        "service": "Squarespace",
        "description": "Squarespace websites",
        "cnames": ["*.squarespace.com", "ext-cust.squarespace.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "No Such Account", "weight": 8},
        ],
        "takeover_possible": False,
        "documentation": "Requires domain verification",
    },
    {
        "service": "Tumblr",
        "description": "Tumblr custom domains",
        "cnames": ["domains.tumblr.com", "*.tumblr.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Whatever you were looking for doesn't currently exist at this address", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Create a Tumblr blog and set the hostname as custom domain",
    },
    {
        "service": "Strikingly",
        "description": "Strikingly site builder",
        "cnames": ["*.s.strikinglydns.com", "*.strikingly.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "But if you're looking to build your own website", "weight": 10, "required": True},
            {"type": "http_body", "pattern": "page not found", "weight": 3},
        ],
        "takeover_possible": True,
        "poc": "Create a Strikingly site and connect the hostname",
    },
    {
        "service": "Wix",
        "description": "Wix site builder",
        "cnames": ["*.wixdns.net", "*.wixsite.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Error ConnectYourDomain occurred", "weight": 8},
        ],
        "takeover_possible": False,
        "documentation": "Requires domain verification",
    },
    {
        "service": "Tilda",
        "description": "Tilda site builder",
        "cnames": ["*.tilda.ws"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Please renew your subscription", "weight": 8},
        ],
        "takeover_possible": False,
        "documentation": "Edge case: depends on account state",
    },
    {
        "service": "Cargo Collective",
        "description": "Cargo portfolio sites",
        "cnames": ["*.cargocollective.com", "subdomain.cargocollective.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "If you're moving your domain away from Cargo you must make this configuration through your registrar's DNS control panel", "weight": 10, "required": True},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": True,
        "poc": "Create a Cargo site and add the hostname as custom domain",
    },
    {
        "service": "Worksites",
        "description": "Worksites hosting",
        "cnames": ["*.worksites.net"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Hello! Sorry, but the website you", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Create a Worksites site with the hostname",
    },
]
