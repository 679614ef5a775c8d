"""WhatsApp relay function for new job applications."""
