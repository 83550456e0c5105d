"""
Recipe Skill

Alexa スキルのバックエンド (AWS Lambda):
- Intent Dispatcher (インテント → クエリ → 応答)
- Connection Holder (プロセス単位で DynamoDB 接続を再利用)
- Alexa Lambda Handler
"""
