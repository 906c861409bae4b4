"""Example additional-info text per platform, shown as the form's placeholder."""

from schemas import Platform, parse_platform

PLACEHOLDERS = {
    Platform.TWITTER: "🎓 5+ years in tech\n💻 Building in public\n🚀 Sharing daily insights",
    Platform.INSTAGRAM: "📸 Daily tech tips\n💫 Tutorial creator\n🎯 Helping devs grow",
    Platform.YOUTUBE: "🎥 Weekly coding tutorials\n💡 Tech tips & tricks\n🌟 Community projects",
    Platform.LINKEDIN: "Leading tech initiatives\nMentoring developers\nBuilding innovative solutions",
    Platform.FARCASTER: "⚡\ufe0f Web3 enthusiast\n🔮 Building the future\n🌟 Daily tech insights",
    Platform.BLUESKY: "✨ Tech explorer\n🚀 Building in public\n💫 Sharing knowledge",
}


def generate_placeholder(platform: Platform | str) -> str:
    resolved = parse_platform(platform)
    if resolved is None:
        return ""
    return PLACEHOLDERS[resolved]
