"""Fixed sample resume used by the seed endpoint and script."""

SAMPLE_RESUME = {
    "name": "Full Stack Developer Resume",
    "description": "Resume focused on full-stack development experience",
    "template": "modern",
    "font_family": "inter",
    "font_size": "base",
    "line_spacing": "normal",
    "margin_size": "md",
    "ranking": 5,
}

SAMPLE_SECTIONS = [
    {
        "type": "summary",
        "title": "Professional Summary",
        "content": (
            "Experienced full-stack developer with a strong background in building scalable web "
            "applications using modern technologies. Proven track record of delivering high-quality "
            "solutions and leading development teams."
        ),
    },
    {
        "type": "experience",
        "title": "Work Experience",
        "content": """Senior Full Stack Developer | TechCorp Inc.
Jan 2020 - Present
• Led development of microservices architecture using Node.js and React
• Improved application performance by 40% through optimization
• Mentored junior developers and implemented code review processes

Full Stack Developer | WebSolutions Ltd
Jun 2017 - Dec 2019
• Developed and maintained multiple client projects using MERN stack
• Implemented CI/CD pipelines reducing deployment time by 60%
• Collaborated with UX team to improve user experience""",
    },
    {
        "type": "skills",
        "title": "Technical Skills",
        "content": """Languages: JavaScript (ES6+), TypeScript, Python, SQL
Frontend: React, Next.js, Vue.js, HTML5, CSS3, Tailwind
Backend: Node.js, Express, Django, PostgreSQL, MongoDB
Tools: Git, Docker, AWS, CI/CD, Jest, Cypress""",
    },
    {
        "type": "education",
        "title": "Education",
        "content": """Bachelor of Science in Computer Science
Tech University
2013 - 2017
• GPA: 3.8
• Relevant coursework: Data Structures, Algorithms, Web Development""",
    },
    {
        "type": "projects",
        "title": "Notable Projects",
        "content": """E-commerce Platform Redesign
• Led team of 5 developers in complete platform overhaul
• Implemented headless CMS and modern frontend architecture
• Resulted in 25% increase in conversion rate

Real-time Analytics Dashboard
• Built scalable dashboard processing 1M+ events daily
• Utilized WebSocket for live updates and Redis for caching
• Reduced data processing latency by 70%""",
    },
    {
        "type": "certifications",
        "title": "Certifications",
        "content": """AWS Certified Solutions Architect
Google Cloud Professional Developer
MongoDB Certified Developer""",
    },
]
