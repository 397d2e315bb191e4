import os

# Must be set before weekly_scheduler.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["FIREBASE_PROJECT_ID"] = "weekly-scheduler-test"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"
os.environ["ROOT_DOMAIN"] = "weeklyscheduler.vercel.app"
os.environ["APP_SUBDOMAIN"] = "weeklyscheduler"
os.environ["ENVIRONMENT"] = "development"
os.environ["SECURITY_HEADERS_ENABLED"] = "true"
