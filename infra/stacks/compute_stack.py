"""
Lambda Stack (Serverless Compute)

Lambda Functions:
- Alexa Skill Handler (Intent Dispatcher)
"""
from typing import Optional

from aws_cdk import (
    BundlingOptions,
    NestedStack,
    Duration,
    aws_lambda as lambda_,
    aws_iam as iam,
    aws_dynamodb as dynamodb,
    aws_logs as logs,
)
from constructs import Construct

# 起動時の疎通確認の上限 (秒)
CONNECT_TIMEOUT_SECONDS = 5
READ_TIMEOUT_SECONDS = 3


class ComputeStack(NestedStack):
    """Lambda ベースのサーバレスコンピュートスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        recipes_table: dynamodb.Table,
        database_name: str = 'alexa',
        skill_id: Optional[str] = None,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # Alexa Skill Handler Lambda
        # =================================================================

        self.skill_fn = lambda_.Function(
            self, 'SkillFn',
            function_name='recipe-skill-handler',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='recipe_skill.handlers.alexa.handler.lambda_handler',
            code=lambda_.Code.from_asset(
                '.',
                exclude=['cdk.out', 'tests', '.venv'],
                bundling=BundlingOptions(
                    image=lambda_.Runtime.PYTHON_3_12.bundling_image,
                    command=[
                        'bash', '-c',
                        'pip install --no-cache-dir . -t /asset-output',
                    ],
                ),
            ),
            memory_size=256,
            # 疎通確認 (最大 CONNECT_TIMEOUT_SECONDS) + クエリ (最大 READ_TIMEOUT_SECONDS x 2) より長く
            timeout=Duration.seconds(CONNECT_TIMEOUT_SECONDS + 10),
            environment={
                'RECIPES_ENVIRONMENT': 'production',
                'RECIPES_DATABASE_URI': f'https://dynamodb.{self.region}.amazonaws.com',
                'RECIPES_DATABASE_NAME': database_name,
                'RECIPES_CONNECT_TIMEOUT_SECONDS': str(CONNECT_TIMEOUT_SECONDS),
                'RECIPES_READ_TIMEOUT_SECONDS': str(READ_TIMEOUT_SECONDS),
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        recipes_table.grant_read_data(self.skill_fn)
        # 起動時の疎通確認 (ListTables)
        self.skill_fn.add_to_role_policy(
            iam.PolicyStatement(
                actions=['dynamodb:ListTables'],
                resources=['*'],
            )
        )

        # Alexa Skills Kit Trigger
        self.skill_fn.add_permission(
            'AlexaSkillsKitInvoke',
            principal=iam.ServicePrincipal('alexa-appkit.amazon.com'),
            action='lambda:InvokeFunction',
            event_source_token=skill_id,
        )
