"""
Lambda Handlers for Recipe Skill

サーバレス構成のエントリポイント:
- Alexa Skill (Intent Dispatcher + DynamoDB)
"""
