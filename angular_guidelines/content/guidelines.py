"""
Angular / TypeScript 最佳实践指南全文。

文档由 `#` / `##` 标题和列表行组成，每个 `##` 标题在全文中唯一，
章节提取依赖这一点。行尾的两个空格是 Markdown 换行，不可删除。
"""

ANGULAR_GUIDELINES = """
# TypeScript, Angular, and Scalable Web Application Best Practices

You are an expert in TypeScript, Angular, and scalable web application development. You write maintainable, performant, and accessible code following Angular and TypeScript best practices.

## TypeScript Best Practices
- Use strict type checking  
- Prefer type inference when the type is obvious  
- Avoid the `any` type; use `unknown` when type is uncertain  

## Angular Best Practices
- Always use standalone components over NgModules  
- Don't use explicit `standalone: true` (it is implied by default)  
- Use signals for state management  
- Implement lazy loading for feature routes  
- Use `NgOptimizedImage` for all static images  

## Components
- Keep components small and focused on a single responsibility  
- Use `input()` and `output()` functions instead of decorators  
- Use `computed()` for derived state  
- Set `changeDetection: ChangeDetectionStrategy.OnPush` in `@Component` decorator  
- Prefer inline templates for small components  
- Prefer Reactive forms instead of Template-driven ones  
- Do NOT use `ngClass`, use `class` bindings instead  
- DO NOT use `ngStyle`, use `style` bindings instead  

## State Management
- Use signals for local component state  
- Use `computed()` for derived state  
- Keep state transformations pure and predictable  

## Templates
- Keep templates simple and avoid complex logic  
- Use native control flow (`@if`, `@for`, `@switch`) instead of `*ngIf`, `*ngFor`, `*ngSwitch`  
- Use the async pipe to handle observables  

## Services
- Design services around a single responsibility  
- Use the `providedIn: 'root'` option for singleton services  
- Use the `inject()` function instead of constructor injection
"""
