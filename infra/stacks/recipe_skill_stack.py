"""
Recipe Skill Main Stack (Serverless)

Alexa スキル → Lambda → DynamoDB のサーバレスメインスタック。
"""
from typing import Optional

from aws_cdk import (
    Stack,
    CfnOutput,
)
from constructs import Construct

from infra.stacks.data_stack import DataStack
from infra.stacks.compute_stack import ComputeStack

# 論理データベース (テーブル名プレフィックス)
DATABASE_NAME = 'alexa'


class RecipeSkillStack(Stack):
    """Recipe Skill のメインスタック (Serverless)。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        skill_id: Optional[str] = None,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Data Stack (DynamoDB)
        data_stack = DataStack(self, 'Data', database_name=DATABASE_NAME)

        # Compute Stack (Lambda Function)
        compute_stack = ComputeStack(
            self, 'Compute',
            recipes_table=data_stack.recipes_table,
            database_name=DATABASE_NAME,
            skill_id=skill_id,
        )

        # Outputs
        CfnOutput(self, 'RecipesTableName', value=data_stack.recipes_table.table_name)
        CfnOutput(self, 'SkillFunctionArn', value=compute_stack.skill_fn.function_arn)
