"""Built-in sample dashboard: a six-tab personal profile."""

from __future__ import annotations

from tabdash.cli.core.layout import Fixed, Percent
from tabdash.content.nodes import (
    GAUGE_STYLE,
    Block,
    ContentNode,
    Gauge,
    Layers,
    Paragraph,
    SelectableList,
    Tab,
    hsplit,
    vsplit,
)
from tabdash.core.color import Color
from tabdash.core.style import Style

LABEL_STYLE = Style(fg=Color.YELLOW, bold=True)


def panel(title: str, text: str, title_style: Style | None = None) -> Block:
    """Bordered, wrapped paragraph."""
    if title_style is None:
        return Block(title=title, kind=Paragraph(text, wrap=True))
    return Block(title=title, kind=Paragraph(text, wrap=True), title_style=title_style)


def centered(node: ContentNode) -> ContentNode:
    """Place node in the middle 80% of the area."""
    return vsplit(
        [Percent(10), Percent(80), Percent(10)],
        [Block(borders=False), hsplit(
            [Percent(10), Percent(80), Percent(10)],
            [Block(borders=False), node, Block(borders=False)],
        ), Block(borders=False)],
    )


def skill(name: str, score: int) -> Block:
    return Block(
        title=name,
        kind=Gauge(score, label=f"{score} / 100"),
        style=GAUGE_STYLE,
        title_style=LABEL_STYLE,
        borders=False,
    )


def skill_panel(title: str, skills: list[tuple[str, int]]) -> ContentNode:
    """Bordered frame with one two-row gauge per skill inside it."""
    gauges = vsplit([Fixed(2)] * len(skills), [skill(n, s) for n, s in skills], margin=1)
    return Layers([Block(title=title), gauges])


def item_list(title: str, items: list[str]) -> Block:
    return Block(title=title, kind=SelectableList(items), title_style=LABEL_STYLE)


WELCOME = centered(panel(
    "Welcome to the tabdash sample profile",
    "\nUse {mod=bold;fg=yellow ←}  and {mod=bold;fg=yellow →}  to move between the tabs.\n\n"
    "Use {mod=bold;fg=yellow q} to exit the application.\n\n"
    "Every panel on these tabs is laid out from declarative constraints "
    "and re-flowed whenever the terminal is resized.\n\n"
    "{mod=bold;fg=yellow **Note:} The layout is tuned for a terminal of 120x40 characters.",
))

PERSONAL = vsplit([Percent(50), Percent(50)], [
    hsplit([Percent(35), Percent(65)], [
        panel("Information",
              "\n{mod=bold;fg=yellow Name:} Alex Example\n\n"
              "{mod=bold;fg=yellow Role:} Infrastructure Engineer\n\n"
              "{mod=bold;fg=yellow Location:} Anytown\n\n"
              "{mod=bold;fg=yellow Open to remote work}\n"),
        panel("About me",
              "\nI am an engineer interested in {mod=bold infrastructure architecture} "
              "and {mod=bold systems automation}.\n\n"
              "I attend local {mod=bold cloud} and {mod=bold Python} meetups.\n\n"
              "Outside work I enjoy {mod=bold cycling}, {mod=bold music production} "
              "and {mod=bold board games}.\n"),
    ]),
    hsplit([Percent(20), Percent(45), Percent(35)], [
        panel("Languages",
              "\n{mod=bold;fg=yellow English:} Native\n\n"
              "{mod=bold;fg=yellow German:} Fluent\n\n"
              "{mod=bold;fg=yellow Spanish:} Basic\n"),
        panel("Education",
              "\n{mod=bold;fg=yellow Introduction to Computer Science}\n"
              "abstraction, algorithms, data structures, encapsulation, "
              "resource management, security and web development.\n\n"
              "{mod=bold;fg=yellow B.Sc. Information Systems}\n"
              "networks, databases and distributed systems.\n"),
        panel("Contact",
              "\n{mod=bold;fg=yellow Email:} alex@example.com\n\n"
              "{mod=bold;fg=yellow Website:} https://example.com\n\n"
              "{mod=bold;fg=yellow Code:} https://example.org/alex\n"),
    ]),
])

SKILLS = vsplit([Percent(35), Percent(35), Percent(30)], [
    skill_panel("Tech Stack", [
        ("Cloud", 85),
        ("Terraform", 80),
        ("Bash", 80),
        ("Docker", 75),
        ("Kubernetes", 75),
    ]),
    skill_panel("Operating Systems", [
        ("GNU/Linux:", 95),
        ("macOS:", 90),
        ("Windows:", 60),
    ]),
    Layers([
        Block(title="Other Skills"),
        hsplit(
            [Fixed(2), Fixed(18), Fixed(2), Fixed(15), Fixed(2), Fixed(13), Fixed(2),
             Fixed(19), Fixed(2), Fixed(15), Fixed(2), Fixed(16), Fixed(2), Fixed(17), Fixed(2)],
            [
                Block(borders=False),
                item_list("Mind", ["Architecture", "Analysis", "Responsiveness", "Communication", "Problem Solving"]),
                Block(borders=False),
                item_list("Languages", ["Python", "Rust", "Lua"]),
                Block(borders=False),
                item_list("CI/CD", ["GitLab CI", "Runners"]),
                Block(borders=False),
                item_list("Monitoring", ["CloudWatch", "", "Prometheus"]),
                Block(borders=False),
                item_list("Databases", ["PostgreSQL", "MySQL", "SQLite"]),
                Block(borders=False),
                item_list("Editors", ["Vim", "VS Code"]),
                Block(borders=False),
                item_list("Honors", ["Team Award 2019", "Mentor of the Year", "Hackathon Winner"]),
                Block(borders=False),
            ],
            margin=1,
        ),
    ]),
])

EXPERIENCE = vsplit([Percent(30), Percent(30), Percent(20), Percent(20)], [
    panel("2019 - 2020: DevOps Engineer at Example Systems",
          "\n{mod=bold;fg=yellow High Performance Platform:} Implemented features serving "
          "thousands of requests per second and migrated backend storage to PostgreSQL.\n\n"
          "{mod=bold;fg=yellow Kubernetes prototype:} Built a prototype of the production "
          "system to test the feasibility of a migration.\n\n"
          "{mod=bold;fg=yellow Others:} Mentored new hires and took part in hiring.\n"),
    panel("2016 - 2018: Software Engineer at Sample Technology",
          "\n{mod=bold;fg=yellow Network library:} Stream interface over an asynchronous I/O library.\n\n"
          "{mod=bold;fg=yellow Tools:} Added linting to the internal toolchain and a switcher "
          "between toolchain versions.\n\n"
          "{mod=bold;fg=yellow Backend development:} Authentication and media pipeline features.\n"),
    panel("2015 - 2016: Software Developer at Placeholder Research",
          "\n{mod=bold;fg=yellow Static analysis:} Detection of undefined and "
          "implementation-defined behaviour.\n\n"
          "Took over two projects to refactor, maintain and extend.\n"),
    panel("2013 - 2015: Software Engineer at Demo Institute",
          "\n{mod=bold;fg=yellow RESTful service:} Query interface for a research database.\n\n"
          "{mod=bold;fg=yellow Clustering:} New algorithm to cluster experimental data.\n"),
])

COURSES = vsplit(
    [Percent(18), Percent(18), Percent(19), Percent(15), Percent(15), Percent(15)],
    [
        panel("Kubernetes Fundamentals - August 2019",
              "\nSetting up, maintaining and using a cluster, deploying containerized "
              "applications and manipulating resources through the API.", LABEL_STYLE),
        panel("Developing Linux Device Drivers - April 2016",
              "\nDriver types, kernel APIs and how devices interface with the kernel.", LABEL_STYLE),
        panel("Linux Kernel Internals and Debugging - March 2016",
              "\nHow the kernel is architected, development methods and working with "
              "the community.", LABEL_STYLE),
        panel("Agile for Developers - August 2015",
              "\nAgile and Scrum practices for object-oriented developers.", LABEL_STYLE),
        panel("Algorithms, Part II - November 2014",
              "\nGraph and string processing algorithms.", LABEL_STYLE),
        panel("Algorithms, Part I - September 2014",
              "\nElementary data structures, sorting and searching.", LABEL_STYLE),
    ],
    margin=1,
)

LOOKING_FOR = centered(panel(
    "What am I looking for?",
    "\n{mod=bold;fg=yellow I am currently looking for new opportunities}\n\n\n"
    "My ideal roles involve a combination of the following:\n\n"
    "\t* Write low level libraries and components.\n"
    "\t* Design, develop and maintain reliable high performance systems.\n"
    "\t* Create and integrate APIs that expose and extend functionality.\n"
    "\t* Improve the tools used during development.\n"
    "\t* Contribute to open source software.",
))


def default_tabs() -> list[Tab]:
    return [
        Tab("Welcome", WELCOME),
        Tab("Personal", PERSONAL),
        Tab("Skills", SKILLS),
        Tab("Experience", EXPERIENCE),
        Tab("Courses", COURSES),
        Tab("Looking For", LOOKING_FOR),
    ]
