"""
Data Stack (Serverless)

DynamoDB (On-Demand)
- Recipes (論理データベース "alexa" のコレクション)
"""
from aws_cdk import (
    NestedStack,
    RemovalPolicy,
    aws_dynamodb as dynamodb,
)
from constructs import Construct


class DataStack(NestedStack):
    """サーバレスデータ層のリソースを管理するスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        database_name: str = 'alexa',
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # DynamoDB Tables
        # =================================================================

        # Recipes Table
        self.recipes_table = dynamodb.Table(
            self, 'Recipes',
            table_name=f'{database_name}-recipes',
            partition_key=dynamodb.Attribute(
                name='id',
                type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=True,
            encryption=dynamodb.TableEncryption.AWS_MANAGED,
            removal_policy=RemovalPolicy.RETAIN,
        )

        # GSI for exact-match lookups by recipe name
        self.recipes_table.add_global_secondary_index(
            index_name='name-index',
            partition_key=dynamodb.Attribute(
                name='name',
                type=dynamodb.AttributeType.STRING
            ),
        )
