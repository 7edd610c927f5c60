DEVTOOLS_FINGERPRINTS = [
    {
        "service": "Bitbucket",
        "description": "Bitbucket cloud pages",
        "cnames": ["*.bitbucket.io"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Repository not found", "weight": 10, "required": True},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": True,
        "poc": "Create the repository and enable Bitbucket pages",
    },
    {
        "service": "Statuspage",
        "description": "Atlassian Statuspage",
        "cnames": ["*.statuspage.io"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Status page pushed a b", "weight": 8},
            {"type": "http_body", "pattern": "You are being redirected", "weight": 6},
            {"type": "http_status", "value": 302, "weight": 3},
        ],
        "min_confidence": 5,
        "takeover_possible": True,
        "poc": "Create a status page and add the hostname as custom domain",
    },
    {
        "service": "Pingdom",
        "description": "Pingdom status pages",
        "cnames": ["*.pingdom.com", "*.status.pingdom.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "Sorry, couldn't find the status page", "weight": 10, "required": True},
            {"type": "http_body", "pattern": "Public report not activated", "weight": 8},
        ],
        "takeover_possible": True,
        "documentation": "https://help.pingdom.com/hc/en-us/articles/205386171-Public-Status-Page",
        "poc": "Create a Pingdom status page and add the hostname as custom domain",
    },
    {
        "service": "UptimeRobot",
        "description": "UptimeRobot status pages",
        "cnames": ["*.stats.uptimerobot.com", "*.uptimerobot.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "page not found", "weight": 8},
        ],
        "min_confidence": 5,
        "takeover_possible": True,
        "poc": "Create an UptimeRobot status page and add the hostname as custom domain",
    },
    {
        "service": "JetBrains YouTrack",
        "description": "JetBrains YouTrack InCloud",
        "cnames": ["*.youtrack.cloud", "*.myjetbrains.com"],
        "fingerprints": [
            {"type": "http_body", "pattern": "is not a registered InCloud YouTrack", "weight": 10, "required": True},
        ],
        "takeover_possible": True,
        "documentation": "https://www.jetbrains.com/help/youtrack/incloud/Domain-Settings.html",
        "poc": "Create a YouTrack InCloud instance and add the hostname as custom domain",
    },
    {
        "service": "Readme.io",
        "description": "Readme.io documentation platform",
        "cnames": ["*.readme.io"],
        "fingerprints": [
            {"type": "http_body", "pattern": "The creators of this project are still working on making everything perfect!", "weight": 10, "required": True},
            {"type": "http_body", "pattern": "Project not found", "weight": 10},
        ],
        "takeover_possible": True,
        "poc": "Create a Readme.io project and configure the hostname as custom domain",
    },
    {
        "service": "Discourse",
        "description": "Discourse forum hosting",
        "cnames": ["*.trydiscourse.com"],
        "fingerprints": [
            {"type": "dns_nxdomain"},
        ],
        "takeover_possible": True,
        "documentation": "https://meta.discourse.org/",
        "poc": "Create a Discourse instance and configure the hostname",
    },
    {
        "service": "Ngrok",
        "description": "Ngrok tunnel service",
        "cnames": ["*.ngrok.io", "*.ngrok-free.app"],
        "fingerprints": [
            {"type": "http_body", "pattern": r"Tunnel .*\.ngrok(-free)?\.(io|app) not found", "regex": True, "weight": 10, "required": True},
            {"type": "http_body", "pattern": "ngrok gateway error", "weight": 8},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": True,
        "documentation": "https://ngrok.com/docs#http-custom-domains",
        "poc": "Register an ngrok tunnel with the hostname",
    },
    {
        "service": "Gemfury",
        "description": "Gemfury package hosting",
        "cnames": ["*.furyns.com", "*.fury.io"],
        "fingerprints": [
            {"type": "http_body", "pattern": "404: This page could not be found", "weight": 8},
        ],
        "min_confidence": 5,
        "takeover_possible": True,
        "poc": "Create a Gemfury repository and configure the hostname",
    },
    {
        "service": "Feedpress",
        "description": "Feedpress podcast hosting",
        "cnames": ["*.redirect.feedpress.me"],
        "fingerprints": [
            {"type": "http_body", "pattern": "The feed has not been found", "weight": 10, "required": True},
            {"type": "http_status", "value": 404, "weight": 2},
        ],
        "takeover_possible": True,
        "poc": "Create a feed with the hostname as custom domain",
    },
]
