# ตัวแปรที่ต้องมีก่อนเริ่มบอท (ลำดับนี้คือลำดับที่รายงาน)
REQUIRED_ENV_VARS = ("DISCORD_TOKEN", "APPLICATION_ID", "N8N_WEBHOOK_URL")

DEFAULT_WEBHOOK_TIMEOUT = 10.0

# ข้อความตอบกลับผู้ใช้
REPLY_MESSAGES = {
    "ack": "Got it. Generating ideas now... I will post them here.",
    "webhook_failed": "Sorry, something went wrong triggering the workflow.",
    "error": "Sorry, something went wrong.",
}

# slash commands ที่ส่งต่อไปยัง n8n
RELAY_COMMANDS = {
    "generate-ideas": "Generate new content ideas",
    "new-idea": "Create a new idea from a description",
}

NEW_IDEA_OPTION_DESCRIPTION = "Short summary of the idea"
