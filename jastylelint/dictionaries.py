"""技術用語の表記辞書（誤表記 -> 正式表記）。

カテゴリごとに設定で有効/無効を切り替える。ユーザー定義の表記ルールは
build_term_dictionary() で最後にマージされ、同じキーなら上書きする。
"""
from __future__ import annotations

from typing import Dict, Mapping, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .config import RulesConfig

WEB_TECH_DICTIONARY: Dict[str, str] = {
    "Javascript": "JavaScript",
    "javascript": "JavaScript",
    "Typescript": "TypeScript",
    "typescript": "TypeScript",
    "Github": "GitHub",
    "github": "GitHub",
    "Nodejs": "Node.js",
    "nodejs": "Node.js",
    "NodeJs": "Node.js",
    "Vscode": "VS Code",
    "vscode": "VS Code",
    "VScode": "VS Code",
    "Webpack": "webpack",
    "ReactJs": "React",
    "Reactjs": "React",
    "VueJs": "Vue.js",
    "Vuejs": "Vue.js",
    "vuejs": "Vue.js",
    "AngularJs": "Angular",
    "Angularjs": "Angular",
    "Nextjs": "Next.js",
    "nextjs": "Next.js",
    "NextJs": "Next.js",
}

GENERATIVE_AI_DICTIONARY: Dict[str, str] = {
    "chatgpt": "ChatGPT",
    "Chatgpt": "ChatGPT",
    "chat-gpt": "ChatGPT",
    "openai": "OpenAI",
    "Openai": "OpenAI",
    "Open AI": "OpenAI",
    "claude": "Claude",
    "gpt-4": "GPT-4",
    "gpt4": "GPT-4",
    "GPT4": "GPT-4",
    "llm": "LLM",
    "Llm": "LLM",
    "rag": "RAG",
    "Rag": "RAG",
    "gemini": "Gemini",
    "copilot": "Copilot",
    "Co-pilot": "Copilot",
    "midjourney": "Midjourney",
    "Mid Journey": "Midjourney",
    "stable diffusion": "Stable Diffusion",
    "StableDiffusion": "Stable Diffusion",
    "anthropic": "Anthropic",
}

AWS_DICTIONARY: Dict[str, str] = {
    "aws": "AWS",
    "Aws": "AWS",
    "ec2": "EC2",
    "s3": "S3",
    "lambda": "Lambda",
    "dynamodb": "DynamoDB",
    "Dynamodb": "DynamoDB",
    "rds": "RDS",
    "cloudformation": "CloudFormation",
    "Cloud Formation": "CloudFormation",
    "cloudwatch": "CloudWatch",
    "Cloud Watch": "CloudWatch",
    "ecs": "ECS",
    "eks": "EKS",
    "fargate": "Fargate",
    "sagemaker": "SageMaker",
    "Sagemaker": "SageMaker",
    "Sage Maker": "SageMaker",
    "bedrock": "Bedrock",
}

AZURE_DICTIONARY: Dict[str, str] = {
    "azure": "Azure",
    "AZURE": "Azure",
    "azure functions": "Azure Functions",
    "azure devops": "Azure DevOps",
    "AzureDevOps": "Azure DevOps",
    "azure ad": "Azure AD",
    "AzureAD": "Azure AD",
    "cosmos db": "Cosmos DB",
    "CosmosDB": "Cosmos DB",
    "app service": "App Service",
    "azure openai": "Azure OpenAI",
    "AzureOpenAI": "Azure OpenAI",
}

OCI_DICTIONARY: Dict[str, str] = {
    "oci": "OCI",
    "Oci": "OCI",
    "oracle cloud infrastructure": "Oracle Cloud Infrastructure",
    "oracle cloud": "Oracle Cloud",
    "compute instance": "Compute Instance",
    "object storage": "Object Storage",
    "autonomous database": "Autonomous Database",
    "oci generative ai": "OCI Generative AI",
}

# (設定キー, 辞書)
DICTIONARY_SWITCHES = (
    ("enable_web_tech_dictionary", WEB_TECH_DICTIONARY),
    ("enable_generative_ai_dictionary", GENERATIVE_AI_DICTIONARY),
    ("enable_aws_dictionary", AWS_DICTIONARY),
    ("enable_azure_dictionary", AZURE_DICTIONARY),
    ("enable_oci_dictionary", OCI_DICTIONARY),
)


def build_term_dictionary(config: "RulesConfig", extra: Mapping[str, str] | None = None) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    for key, table in DICTIONARY_SWITCHES:
        if getattr(config, key):
            merged.update(table)
    merged.update(config.custom_notation_rules)
    if extra:
        merged.update(extra)
    # 誤表記と正式表記が同じものは指摘しない
    return {k: v for k, v in merged.items() if k and k != v}


__all__ = [
    "WEB_TECH_DICTIONARY",
    "GENERATIVE_AI_DICTIONARY",
    "AWS_DICTIONARY",
    "AZURE_DICTIONARY",
    "OCI_DICTIONARY",
    "DICTIONARY_SWITCHES",
    "build_term_dictionary",
]
