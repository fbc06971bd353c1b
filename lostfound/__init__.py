"""Lost & Found item tracking API with realtime chat and notifications."""
