MARKETING_FINGERPRINTS = [
    {
        "service": "Unbounce",
        "description": "Unbounce landing pages",
        "cnames": ["*.unbouncepages.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "The requested URL was not found on this server", "weight": 6},
            {"type": "http_body", "pattern": "The page you were looking for doesn't exist", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Add the hostname as custom domain in Unbounce",
    },
    {
        "service": "HubSpot",
        "description": "HubSpot CMS",
        "cnames": ["*.hubspot.net", "*.hs-sites.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Domain not found", "weight": 10},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": False,
        "documentation": "Requires HubSpot account verification",
    },
    {
        "service": "Marketo",
        "description": "Marketo landing pages",
        "cnames": ["*.mktoedge.com", "*.mktoweb.com", "mkto-*.com"],
        "fingerprints": [
            {"type": "dns_nxdomain"},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": False,
        "documentation": "Landing page domains are bound to the Marketo instance",
    },
    {
        "service": "Campaign Monitor",
        "description": "Campaign Monitor landing pages",
        "cnames": ["*.createsend.com", "*.campaignmonitor.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Trying to access your account?", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "documentation": "https://help.campaignmonitor.com/custom-domain-names",
        "poc": "Create a Campaign Monitor page and add the hostname as custom domain",
    },
    {
        "service": "GetResponse",
        "description": "GetResponse landing pages",
        "cnames": ["*.getresponse.com", "*.gr8.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "With GetResponse Landing Pages, lead generation has never been easier", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Create a GetResponse landing page with the hostname as custom domain",
    },
    {
        "service": "LaunchRock",
        "description": "LaunchRock landing pages",
        "cnames": ["*.launchrock.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "It looks like you may have taken a wrong turn somewhere", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Create a LaunchRock page with the hostname as custom domain",
    },
    {
        "service": "Landingi",
        "description": "Landingi landing pages",
        "cnames": ["*.landingi.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "It looks like you're lost", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Create a Landingi page with the hostname as custom domain",
    },
    {
        "service": "Agile CRM",
        "description": "Agile CRM landing pages",
        "cnames": ["*.agilecrm.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Sorry, this page is no longer available", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Create a landing page in Agile CRM",
    },
    {
        "service": "Uberflip",
        "description": "Uberflip content hub",
        "cnames": ["*.read.uberflip.com", "*.uberflip.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "The URL you've accessed does not provide a hub", "weight": 10, "required": True},
            {"type": "http_body", "pattern": "does not provide a hub", "weight": 8},
        ],
        "takeover_possible": True,
        "documentation": "https://help.uberflip.com/hc/en-us/articles/360018786372",
        "poc": "Create an Uberflip hub and configure the hostname as custom domain",
    },
    {
        "service": "Smartling",
        "description": "Smartling translation proxy",
        "cnames": ["*.smartling.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Domain is not configured", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "poc": "Ask Smartling support to bind the hostname to your project",
    },
]
