#!/usr/bin/env python3
"""
CDK Application Entry Point

Recipe Skill - Alexa スキル用の Lambda + DynamoDB をデプロイ。
"""
import os
import aws_cdk as cdk

from infra.stacks.recipe_skill_stack import RecipeSkillStack

app = cdk.App()

# 環境設定
env = cdk.Environment(
    account=os.environ.get('CDK_DEFAULT_ACCOUNT'),
    region=os.environ.get('CDK_DEFAULT_REGION', 'us-east-1'),
)

RecipeSkillStack(
    app,
    'RecipeSkillStack',
    skill_id=app.node.try_get_context('skill_id'),
    env=env,
    description='Recipe Skill - Alexa Intent Dispatcher on Lambda + DynamoDB',
)

app.synth()
